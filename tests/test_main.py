# tests/test_main.py
import main


def test_run_solves_demo_puzzles(capsys):
    assert main.run([main.CLASSIC, main.REFERENCE], verbose=False) == 2
    out = capsys.readouterr().out
    assert "¿Es correcta? True" in out


def test_run_reports_no_solution(capsys):
    table = [[0] * 9 for _ in range(9)]
    table[0] = [0, 0, 0, 4, 5, 6, 7, 8, 9]
    table[1][0] = 3
    assert main.run([table], verbose=False) == 0
    assert "Sin solución" in capsys.readouterr().out
