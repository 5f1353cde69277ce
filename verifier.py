# verifier.py
from candidates import DIGITS, Grid, used_in_block, used_in_column, used_in_row


def verify_solution(table: Grid) -> bool:
    """Comprueba que cada fila, columna y bloque contenga exactamente 1..9.

    Independiente del solver: solo sirve para validar una solución ya hecha.
    """
    for i in range(9):
        if used_in_row(table, i) != DIGITS or used_in_column(table, i) != DIGITS:
            return False
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            if used_in_block(table, br, bc) != DIGITS:
                return False
    return True
