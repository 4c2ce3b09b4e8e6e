import pytest

from strutturedati.bins import Bins


def test_values_are_routed_by_range():
    bins = Bins()
    for value in (2, 3, 1, 4, 5, 3, 4, 9, 5, 6, 8):
        bins.insert(value)
    assert bins.render(0) == "(TESTA) [2 3 1 3] (CODA)"
    assert bins.render(1) == "(TESTA) [4 5 4 5 6] (CODA)"
    assert bins.render(2) == "(TESTA) [9 8] (CODA)"
    assert bins.freq(0) + bins.freq(1) + bins.freq(2) == 11


def test_out_of_range_values_go_to_last_bin():
    bins = Bins()
    bins.insert(0)
    bins.insert(12)
    assert bins.freq(0) == 0
    assert bins.render(2) == "(TESTA) [0 12] (CODA)"


def test_mean_of_single_value():
    bins = Bins()
    bins.insert(7)
    assert bins.mean(2) == 7


def test_empty_bin():
    bins = Bins()
    assert bins.mean(1) == 0.0
    assert bins.freq(1) == 0
    assert bins.delete(1) is None
    assert bins.render(1) == "Coda vuota !"


def test_delete_removes_oldest():
    bins = Bins()
    bins.insert(1)
    bins.insert(2)
    assert bins.delete(0) == 1
    assert bins.render(0) == "(TESTA) [2] (CODA)"
    assert bins.mean(0) == 2


@pytest.mark.parametrize("index", [-1, 3])
def test_bad_index(index):
    bins = Bins()
    with pytest.raises(IndexError):
        bins.delete(index)
    with pytest.raises(IndexError):
        bins.mean(index)
    with pytest.raises(IndexError):
        bins.freq(index)
    with pytest.raises(IndexError):
        bins.render(index)