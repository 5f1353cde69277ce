# utilities.py
"""utilities

Entrada/salida de tableros: normalización (listas o arrays de numpy),
lectura de puzzles desde texto o ``.npy`` y representación en consola.
"""

import os
import re
from typing import List, Optional

import numpy as np
from rich.console import Console

from candidates import Grid

_SEPARATORS = re.compile(r"[\s|+\-]")


def to_table(grid_source) -> Grid:
    """Convierte un tablero 9x9 (lista de listas o ``np.ndarray``) en listas de int.

    Lanza ``ValueError`` si la forma no es 9x9 o algún valor no es un entero en [0, 9].
    """
    if len(grid_source) != 9 or any(len(row) != 9 for row in grid_source):
        raise ValueError("El tablero debe ser 9x9.")
    g = [[0] * 9 for _ in range(9)]
    for r in range(9):
        for c in range(9):
            # numpy array (r,c) o lista de listas [r][c]
            try:
                raw = grid_source[r, c]  # type: ignore[index]
            except TypeError:
                raw = grid_source[r][c]
            if isinstance(raw, (bool, np.bool_)) or not isinstance(raw, (int, np.integer)):
                raise ValueError(f"Valor no entero en ({r}, {c}): {raw!r}")
            v = int(raw)
            if not 0 <= v <= 9:
                raise ValueError(f"Valor fuera de rango en ({r}, {c}): {v}")
            g[r][c] = v
    return g


def parse_grid(text: str) -> Grid:
    """Lee un tablero de 81 casillas; '0' o '.' marcan las vacías."""
    cells = _SEPARATORS.sub("", text)
    if len(cells) != 81:
        raise ValueError(f"Se esperaban 81 casillas y hay {len(cells)}.")
    bad = sorted(set(ch for ch in cells if ch not in "0123456789."))
    if bad:
        raise ValueError(f"Caracteres no válidos en el tablero: {''.join(bad)}")
    digits = [0 if ch == "." else int(ch) for ch in cells]
    return [digits[i:i + 9] for i in range(0, 81, 9)]


def parse_grids(text: str) -> List[Grid]:
    """Separa varios puzzles por líneas en blanco o comentarios ``#``.

    Un puzzle puede ocupar 9 líneas o una sola línea de 81 casillas.
    """
    grids: List[Grid] = []
    block: List[str] = []

    def flush() -> None:
        if block:
            try:
                grids.append(parse_grid("".join(block)))
            except ValueError as e:
                raise ValueError(f"Puzzle {len(grids) + 1}: {e}") from e
            block.clear()

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            flush()
            continue
        if len(_SEPARATORS.sub("", stripped)) == 81:
            flush()
            block.append(stripped)
            flush()
            continue
        block.append(stripped)
    flush()
    return grids


def load_grids(path: str) -> List[Grid]:
    """Carga uno o varios tableros desde ``.npy`` (9x9 o n x 9 x 9) o texto."""
    if os.path.splitext(path)[1].lower() == ".npy":
        arr = np.load(path)
        if arr.shape == (9, 9):
            arr = arr[None, ...]
        if arr.ndim != 3 or arr.shape[1:] != (9, 9):
            raise ValueError(f"Forma de array no válida: {arr.shape}")
        return [to_table(a) for a in arr]
    with open(path, "r", encoding="utf-8") as fh:
        return parse_grids(fh.read())


def format_grid(table: Grid) -> str:
    """Texto del tablero con separadores de bloque; '.' para casillas vacías."""
    lines = []
    for r, row in enumerate(table):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        cells = [str(v) if v else "." for v in row]
        lines.append(" | ".join(" ".join(cells[i:i + 3]) for i in range(0, 9, 3)))
    return "\n".join(lines)


def print_grid(table: Grid, console: Optional[Console] = None) -> None:
    (console or Console()).print(format_grid(table), highlight=False)
