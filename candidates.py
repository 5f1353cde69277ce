# candidates.py
"""candidates

Cálculo de candidatos de una celda: dígitos 1..9 que no aparecen todavía en
su fila, su columna ni su bloque 3x3. Las celdas vacías (0) no cuentan.
"""

from typing import List, Set

Grid = List[List[int]]

DIGITS = frozenset(range(1, 10))


def used_in_row(table: Grid, row: int) -> Set[int]:
    return {v for v in table[row] if v != 0}


def used_in_column(table: Grid, col: int) -> Set[int]:
    return {r[col] for r in table if r[col] != 0}


def used_in_block(table: Grid, row: int, col: int) -> Set[int]:
    """Dígitos del bloque 3x3 que contiene (row, col)."""
    br, bc = 3 * (row // 3), 3 * (col // 3)
    used: Set[int] = set()
    for r in range(br, br + 3):
        used.update(v for v in table[r][bc:bc + 3] if v != 0)
    return used


def candidates(table: Grid, row: int, col: int) -> Set[int]:
    """Devuelve los dígitos legales para (row, col).

    Un conjunto vacío indica que la celda no admite ningún valor con el
    estado actual del tablero.
    """
    return set(DIGITS) - used_in_row(table, row) - used_in_column(table, col) - used_in_block(table, row, col)


def _units(table: Grid):
    for i in range(9):
        yield table[i]
        yield [row[i] for row in table]
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            yield [table[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]


def has_conflict(table: Grid) -> bool:
    """``True`` si algún dígito se repite en una fila, columna o bloque."""
    for unit in _units(table):
        vals = [v for v in unit if v != 0]
        if len(vals) != len(set(vals)):
            return True
    return False
