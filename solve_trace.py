# solve_trace.py
"""solve_trace

Observadores del proceso de resolución. El solver notifica cada evento a un
``SolveObserver``; la implementación base no hace nada y ``ConsoleTrace``
imprime la traza con rich (tablero tras cada pasada, asignaciones triviales,
suposiciones y callejones sin salida).
"""

from dataclasses import dataclass, field
from typing import List, Optional
from rich.console import Console

from candidates import Grid
from utilities import format_grid


class SolveObserver:
    """Receptor de eventos del solver. Todos los métodos son opcionales."""

    def trivial(self, row: int, col: int, digit: int) -> None:
        pass

    def pass_completed(self, table: Grid) -> None:
        pass

    def backtracking_started(self) -> None:
        pass

    def assumption(self, row: int, col: int, digit: int) -> None:
        pass

    def dead_end(self, row: int, col: int, digit: int) -> None:
        pass


@dataclass
class ConsoleTrace(SolveObserver):
    """Traza legible por consola."""
    console: Optional[Console] = None
    style: str = "bold cyan"
    show_grids: bool = True  # imprimir el tablero al final de cada pasada

    def __post_init__(self) -> None:
        if self.console is None:
            self.console = Console()

    def _log(self, msg: str, style: Optional[str] = None) -> None:
        self.console.print(msg, style=style or self.style)

    def trivial(self, row: int, col: int, digit: int) -> None:
        self._log(f"Trivial ({row}, {col}) = {digit}")

    def pass_completed(self, table: Grid) -> None:
        if self.show_grids:
            self.console.print(format_grid(table), highlight=False)
            self.console.print("-" * 21)

    def backtracking_started(self) -> None:
        self._log("Sin más casillas triviales. Empezando backtracking", style="bold yellow")

    def assumption(self, row: int, col: int, digit: int) -> None:
        self._log(f"Suponiendo ({row}, {col}) = {digit}", style="bold magenta")

    def dead_end(self, row: int, col: int, digit: int) -> None:
        self._log(f"Callejón sin salida para ({row}, {col}) = {digit}", style="bold red")


@dataclass
class RecordingTrace(SolveObserver):
    """Guarda los eventos como tuplas; útil para inspeccionar una resolución."""
    events: List[tuple] = field(default_factory=list)

    def trivial(self, row: int, col: int, digit: int) -> None:
        self.events.append(("trivial", row, col, digit))

    def pass_completed(self, table: Grid) -> None:
        self.events.append(("pass", [r[:] for r in table]))

    def backtracking_started(self) -> None:
        self.events.append(("backtrack",))

    def assumption(self, row: int, col: int, digit: int) -> None:
        self.events.append(("assume", row, col, digit))

    def dead_end(self, row: int, col: int, digit: int) -> None:
        self.events.append(("dead_end", row, col, digit))

    def of_kind(self, kind: str) -> List[tuple]:
        return [e for e in self.events if e[0] == kind]
