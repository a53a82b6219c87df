import pytest

from numlab.interpolation import lagrange_interpolate, lagrange_weights, main

XS = [1.0, 2.0, 4.0, 7.0]


@pytest.mark.parametrize("xp", [0.0, 1.5, 3.3, 9.0])
def test_weights_sum_to_one(xp):
    assert sum(lagrange_weights(XS, xp)) == pytest.approx(1.0)


@pytest.mark.parametrize("k", range(len(XS)))
def test_weights_at_node_are_indicator(k):
    weights = lagrange_weights(XS, XS[k])
    assert weights == [1.0 if i == k else 0.0 for i in range(len(XS))]


def test_interpolation_reproduces_node_values():
    ys = [3.0, -1.0, 8.0, 0.5]
    for x, y in zip(XS, ys):
        assert lagrange_interpolate(XS, ys, x) == pytest.approx(y)


def test_interpolation_reproduces_quadratic():
    ys = [x * x for x in XS]
    assert lagrange_interpolate(XS, ys, 3.0) == pytest.approx(9.0)


def test_empty_data_gives_zero():
    assert lagrange_interpolate([], [], 2.0) == 0.0


def test_duplicate_nodes_rejected():
    with pytest.raises(ValueError):
        lagrange_weights([1.0, 1.0, 2.0], 0.5)


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        lagrange_interpolate([1.0, 2.0], [1.0], 1.5)


def test_main_output(capsys):
    assert main(["2", "1", "3", "3", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "l(0) = 0.500000"
    assert lines[-1] == "y[2.000000] = 5.000000"


def test_main_odd_points():
    with pytest.raises(SystemExit):
        main(["2", "1", "3", "3"])


def test_main_duplicate_nodes(capsys):
    assert main(["2", "1", "3", "1", "7"]) == 1
    assert "distinct" in capsys.readouterr().err