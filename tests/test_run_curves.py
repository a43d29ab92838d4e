import pytest

import run_curves


def test_compares_both_curves(capsys):
    table = run_curves.main(["--order", "2", "--runs", "10"])
    out = capsys.readouterr().out
    assert "order 2, 4x4 = 16 cells" in out
    assert [row[0] for row in table] == ["Hilbert", "Morton"]
    hilbert, morton = table
    assert hilbert[1] == 15 and hilbert[4] == 0
    assert morton[4] > 0


def test_single_curve_with_path(capsys):
    table = run_curves.main(["--order", "1", "--curve", "hilbert", "--show-path", "--runs", "5"])
    out = capsys.readouterr().out
    assert len(table) == 1
    assert "Hilbert (x, y)" in out
    assert "Morton (x, y)" not in out
    assert "(0, 1)" in out


@pytest.mark.parametrize("order", ["0", "40"])
def test_invalid_order_exits(order, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_curves.main(["--order", order])
    assert excinfo.value.code == 2
    assert "--order must be between" in capsys.readouterr().err


def test_unknown_curve_exits():
    with pytest.raises(SystemExit):
        run_curves.main(["--curve", "peano"])
