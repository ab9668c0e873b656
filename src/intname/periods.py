"""
Nombres en inglés para un periodo (grupo de tres dígitos, 0..999).
"""

from typing import Tuple

__all__ = ["NUMBERS", "TENS", "SCALES", "name_period"]

# "" en la posición 0: un periodo vacío no aporta palabra.
NUMBERS: Tuple[str, ...] = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

TENS: Tuple[str, ...] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

# Índice = posición del periodo (0 = unidades). 2**128 - 1 < 10**39, 13 periodos.
SCALES: Tuple[str, ...] = (
    "", "thousand", "million", "billion", "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion", "nonillion", "decillion", "undecillion",
)


def _name_below_hundred(n: int) -> str:
    if n < 20:
        return NUMBERS[n]
    tens, ones = divmod(n, 10)
    if ones == 0:
        return TENS[tens]
    return f"{TENS[tens]}-{NUMBERS[ones]}"


def name_period(n: int) -> str:
    """Nombre de un valor 0..999 ("" para 0, "nine hundred ninety-nine" para 999).

    El cero nunca se escribe aquí: quien llama decide si el total es "zero".
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Periodo debe ser int, recibido {type(n).__name__}")
    if not 0 <= n <= 999:
        raise ValueError(f"Periodo fuera de rango [0, 999]: {n}")

    if n < 100:
        return _name_below_hundred(n)

    hundreds, rest = divmod(n, 100)
    if rest == 0:
        return f"{NUMBERS[hundreds]} hundred"
    return f"{NUMBERS[hundreds]} hundred {_name_below_hundred(rest)}"
