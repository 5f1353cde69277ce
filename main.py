# -*- coding: utf-8 -*-
"""main

Demostración del solver de Sudoku:
  1) Carga de puzzles (FILE_NAME en texto o .npy; si es None, los de ejemplo)
  2) Resolución: pasadas triviales + backtracking con heurística MRV
  3) Verificación independiente de la solución

Con VERBOSE=True se imprime la traza completa (tablero tras cada pasada,
asignaciones triviales, suposiciones y callejones sin salida).
"""

from typing import List, Optional

from rich import print
from rich.console import Console
from tqdm import tqdm

from candidates import Grid
from sudoku_solver import Solved, SudokuSolver
from utilities import format_grid, load_grids
from verifier import verify_solution

FILE_NAME: Optional[str] = None
VERBOSE = True

# Puzzle de referencia: necesita backtracking
REFERENCE = [
    [0, 0, 0, 0, 0, 0, 0, 9, 0],
    [0, 0, 3, 0, 0, 0, 7, 0, 8],
    [0, 0, 0, 6, 0, 0, 0, 0, 5],
    [0, 0, 0, 5, 9, 0, 0, 0, 6],
    [1, 0, 0, 7, 0, 0, 0, 0, 0],
    [8, 5, 0, 0, 0, 2, 0, 4, 0],
    [0, 0, 9, 0, 7, 0, 0, 0, 0],
    [0, 0, 8, 3, 0, 0, 6, 0, 0],
    [0, 0, 4, 0, 0, 0, 1, 8, 0],
]

# Puzzle clásico: se resuelve casi solo con casillas triviales
CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def run(puzzles: List[Grid], verbose: bool = VERBOSE) -> int:
    """Resuelve cada puzzle e imprime el resultado. Devuelve cuántos se resolvieron."""
    console = Console()
    solved_count = 0
    it = puzzles
    if len(puzzles) > 1:
        it = tqdm(puzzles, desc="Sudokus", ncols=80, colour="blue")

    for idx, grid in enumerate(it, 1):
        console.print(f"\n[bold]Sudoku {idx}:[/bold]")
        console.print(format_grid(grid), highlight=False)

        outcome = SudokuSolver(grid, verbose=verbose).solve()

        console.print("\n[bold]Resultado:[/bold]")
        if isinstance(outcome, Solved):
            solved_count += 1
            console.print(format_grid(outcome.grid), highlight=False)
            ok = verify_solution(outcome.grid)
            console.print(f"¿Es correcta? {ok}", style="bold green" if ok else "bold red")
        else:
            console.print("Sin solución", style="bold red")
    return solved_count


if __name__ == "__main__":
    puzzles = load_grids(FILE_NAME) if FILE_NAME else [REFERENCE, CLASSIC]
    total = run(puzzles)
    print(f"\n[bold cyan]{total}/{len(puzzles)} sudokus resueltos[/bold cyan]")
