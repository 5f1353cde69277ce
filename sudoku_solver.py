# sudoku_solver.py
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple, Union

from candidates import Grid, candidates, has_conflict
from solve_trace import ConsoleTrace, SolveObserver
from utilities import to_table

CellChoice = Tuple[Tuple[int, int], Set[int]]


@dataclass(frozen=True)
class Solved:
    """Resultado con el tablero completo."""
    grid: Grid

    @property
    def solved(self) -> bool:
        return True


@dataclass(frozen=True)
class NoSolution:
    """El tablero no admite solución."""

    @property
    def solved(self) -> bool:
        return False


Outcome = Union[Solved, NoSolution]


@dataclass
class SudokuSolver:
    """Resuelve un tablero de Sudoku con propagación trivial y backtracking.

    Parámetros
    ----------
    grid: List[List[int]]
        Tablero 9x9 con ceros en las casillas vacías (lista o array de numpy).
    verbose: bool, opcional
        Si es ``True`` y no se indica ``observer``, se imprime la traza con rich.
    observer: SolveObserver, opcional
        Receptor de los eventos de la resolución.
    """
    grid: Grid
    verbose: bool = False
    observer: Optional[SolveObserver] = None
    _events: SolveObserver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.grid = to_table(self.grid)
        if self.observer is not None:
            self._events = self.observer
        elif self.verbose:
            self._events = ConsoleTrace()
        else:
            self._events = SolveObserver()

    # --------------------------
    # API pública
    # --------------------------
    def solve(self) -> Outcome:
        """Devuelve ``Solved`` con una copia resuelta o ``NoSolution``.

        El tablero original nunca se modifica. Si las casillas dadas ya se
        contradicen el resultado es ``NoSolution`` sin buscar nada.
        """
        if has_conflict(self.grid):
            return NoSolution()
        return self._solve([row[:] for row in self.grid])

    # --------------------------
    # Métodos internos
    # --------------------------
    def _solve(self, table: Grid) -> Outcome:
        # 1) Casillas triviales: repetir pasadas mientras haya progreso
        while True:
            scan = self._trivial_pass(table)
            if scan is None:
                return NoSolution()
            choice, progress = scan
            self._events.pass_completed(table)
            if choice is None:
                return Solved(table)
            if not progress:
                break

        # 2) Backtracking sobre la casilla con menos candidatos (MRV)
        self._events.backtracking_started()
        (r, c), cands = choice
        for digit in sorted(cands):
            attempt = [row[:] for row in table]
            attempt[r][c] = digit
            self._events.assumption(r, c, digit)
            outcome = self._solve(attempt)
            if isinstance(outcome, Solved):
                return outcome
            self._events.dead_end(r, c, digit)
        return NoSolution()

    def _trivial_pass(self, table: Grid) -> Optional[Tuple[Optional[CellChoice], bool]]:
        """Recorre las 81 casillas una vez, en orden fila a fila.

        Rellena en el sitio las casillas con un único candidato y devuelve
        ``(elección, progreso)``, donde ``elección`` es la casilla ambigua con
        menos candidatos (o ``None`` si no queda ninguna). Devuelve ``None`` si
        alguna casilla se queda sin candidatos.
        """
        best: Optional[CellChoice] = None
        progress = False
        for r in range(9):
            for c in range(9):
                if table[r][c] != 0:
                    continue
                cands = candidates(table, r, c)
                if not cands:
                    return None  # poda: sin opciones
                if len(cands) == 1:
                    digit = next(iter(cands))
                    table[r][c] = digit
                    self._events.trivial(r, c, digit)
                    progress = True
                elif best is None or len(cands) < len(best[1]):
                    best = ((r, c), cands)
        return best, progress


def solve_sudoku(grid: Grid, observer: Optional[SolveObserver] = None, verbose: bool = False) -> Outcome:
    """Atajo funcional sobre ``SudokuSolver``."""
    return SudokuSolver(grid, verbose=verbose, observer=observer).solve()
