from ._utils import make_votes
from ._utils import make_vote_records


__all__ = [
    "make_votes",
    "make_vote_records",
]
