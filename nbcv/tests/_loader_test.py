import numpy as np
import pytest

from nbcv.data import Choice, Class, Record
from nbcv.datasets import load_records
from nbcv.encoder import ChoiceEncoder, ClassEncoder
from nbcv.executions import cross_validation


def _write(tmp_path, lines):
    path = tmp_path / "house-votes.data"
    path.write_text("\n".join(lines) + "\n")
    return path


def test_load_records(tmp_path):
    path = _write(tmp_path, [
        "republican,y,n,?",
        "democrat,n,?,y",
        "democrat,x,y,n",
    ])
    records = load_records(path, n_attributes=3)
    assert records == [
        Record(Class.REPUBLICAN, (Choice.YES, Choice.NO, Choice.UNKNOWN)),
        Record(Class.DEMOCRAT, (Choice.NO, Choice.UNKNOWN, Choice.YES)),
        Record(Class.DEMOCRAT, (Choice.UNKNOWN, Choice.YES, Choice.NO)),
    ]
    assert isinstance(records[0].label, Class)
    assert isinstance(records[0].attributes[0], Choice)


def test_unknown_class_is_fatal(tmp_path):
    path = _write(tmp_path, ["republican,y,n", "independent,n,y"])
    with pytest.raises(ValueError):
        load_records(path, n_attributes=2)


def test_malformed_files(tmp_path):
    with pytest.raises(ValueError):
        load_records(_write(tmp_path, ["republican,y,n", "democrat,y"]), n_attributes=2)
    with pytest.raises(ValueError):
        load_records(_write(tmp_path, ["republican,y"]), n_attributes=2)
    empty = tmp_path / "empty.data"
    empty.write_text("")
    with pytest.raises(ValueError):
        load_records(empty)


def test_choice_encoder():
    encoder = ChoiceEncoder().fit()
    X = np.array([["y", "n", "?"], ["Y", "", "n"]])
    transformed = encoder.transform(X)
    assert np.array_equal(transformed, [[0, 1, 2], [2, 2, 1]])
    assert np.array_equal(encoder.inverse_transform(transformed), [["y", "n", "?"], ["?", "?", "n"]])
    with pytest.raises(ValueError):
        ChoiceEncoder(tokens={"?": Choice.UNKNOWN}).fit()


def test_class_encoder():
    encoder = ClassEncoder()
    y = encoder.fit_transform(np.array(["democrat", "republican", "democrat"]))
    assert np.array_equal(y, [Class.DEMOCRAT, Class.REPUBLICAN, Class.DEMOCRAT])
    assert list(encoder.inverse_transform(y)) == ["democrat", "republican", "democrat"]
    with pytest.raises(ValueError):
        encoder.transform(np.array(["republican", "Republican"]))


def test_load_and_cross_validate(tmp_path):
    rng = np.random.RandomState(0)
    lines = []
    for i in range(40):
        label = "republican" if i % 2 else "democrat"
        votes = rng.choice(["y", "n", "?"], size=16, p=[0.7, 0.2, 0.1] if i % 2 else [0.2, 0.7, 0.1])
        lines.append(",".join([label] + list(votes)))
    records = load_records(_write(tmp_path, lines))
    assert len(records) == 40
    result = cross_validation(records, n_splits=10, random_state=0)
    assert result.scores.shape == (10,)
    assert 0 <= result.mean_score <= 1


def test_short_line_is_rejected(tmp_path):
    path = _write(tmp_path, ["republican,y,n", "democrat,y", "democrat,n,y"])
    with pytest.raises(ValueError, match="line 2"):
        load_records(path, n_attributes=2)


def test_empty_field_is_unknown(tmp_path):
    records = load_records(_write(tmp_path, ["republican,,y", "democrat,n,"]), n_attributes=2)
    assert records == [
        Record(Class.REPUBLICAN, (Choice.UNKNOWN, Choice.YES)),
        Record(Class.DEMOCRAT, (Choice.NO, Choice.UNKNOWN)),
    ]
