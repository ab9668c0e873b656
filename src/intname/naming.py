"""
Nombre en inglés de un entero completo (hasta 128 bits, con o sin signo).

    >>> integer_name(42)
    'forty-two'
    >>> integer_name(1_000_000_007)
    'one billion, seven'
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import List, Optional, Union

from intname.periods import SCALES, name_period
from intname.utils.logging import get_logger
from intname.widths import IntegerRangeError, IntWidth, check_magnitude, resolve_width

__all__ = ["Period", "decompose_periods", "integer_name"]

logger = get_logger(__name__)

SEPARATOR = ", "
NEGATIVE_PREFIX = "negative "


@dataclass(frozen=True)
class Period:
    """Grupo de tres dígitos y su posición (0 = unidades, 1 = thousand, ...)."""
    value: int
    scale: int

    def phrase(self) -> str:
        if self.value == 0:
            return ""
        fragment = name_period(self.value)
        if self.scale == 0:
            return fragment
        return f"{fragment} {SCALES[self.scale]}"


def decompose_periods(magnitude: int) -> List[Period]:
    """Descompone una magnitud en periodos base 1000, el menos significativo primero."""
    if magnitude < 0:
        raise ValueError(f"La magnitud no puede ser negativa: {magnitude}")
    periods: List[Period] = []
    scale = 0
    while magnitude > 0:
        magnitude, value = divmod(magnitude, 1000)
        periods.append(Period(value, scale))
        scale += 1
    return periods


def _as_int(value) -> int:
    # bool es subclase de int pero no es un número para este propósito
    if isinstance(value, bool):
        raise TypeError("integer_name no acepta bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"Se esperaba un entero, recibido {type(value).__name__}") from None


def integer_name(value, width: Optional[Union[str, IntWidth]] = None) -> str:
    """
    Calcula el nombre en inglés de un entero.

    Args:
        value: int (o cualquier objeto con __index__, p.ej. numpy.int64)
        width: ancho opcional ("i8".."i128", "u8".."u128") que el valor debe respetar

    Returns:
        Nombre completo, p.ej. "six hundred fifty thousand, three hundred twenty"

    Raises:
        TypeError: si value no es un entero
        IntegerRangeError: si la magnitud supera 2**128 - 1 o no cabe en `width`
    """
    number = _as_int(value)

    try:
        if width is not None:
            resolve_width(width).check(number)
        magnitude = check_magnitude(number)
    except IntegerRangeError as e:
        logger.debug(f"Entero rechazado: {e}", extra={"width": e.width or "u128"})
        raise

    if magnitude == 0:
        return "zero"

    segments = [p.phrase() for p in reversed(decompose_periods(magnitude)) if p.value]
    name = SEPARATOR.join(segments)
    if number < 0:
        name = NEGATIVE_PREFIX + name
    return name.strip()
