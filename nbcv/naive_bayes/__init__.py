from ._naive_bayes import NaiveBayes


__all__ = [
    "NaiveBayes",
]
