"""
Anchos de entero soportados (i8..i128, u8..u128) y validación de rango.

Los int de Python no tienen ancho fijo; aquí el ancho es un dato explícito
para poder rechazar magnitudes que no caben en 128 bits sin signo.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

__all__ = [
    "MAX_MAGNITUDE",
    "IntegerRangeError",
    "IntWidth",
    "WIDTHS",
    "resolve_width",
    "check_magnitude",
]

MAX_MAGNITUDE = 2**128 - 1


class IntegerRangeError(ValueError):
    """Valor fuera del rango soportado (global o de un ancho concreto)."""

    def __init__(self, value: int, width: Optional[str] = None):
        self.value = value
        self.width = width
        if width is None:
            msg = f"Magnitud fuera de rango (máximo 2**128 - 1): {value}"
        else:
            msg = f"Valor {value} no cabe en {width}"
        super().__init__(msg)


@dataclass(frozen=True)
class IntWidth:
    """Ancho de un entero primitivo."""
    name: str
    bits: int
    signed: bool

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check(self, value: int) -> int:
        """Devuelve `value` si cabe en este ancho; si no, IntegerRangeError."""
        if not self.contains(value):
            raise IntegerRangeError(value, self.name)
        return value


WIDTHS: Dict[str, IntWidth] = {
    w.name: w
    for w in (
        IntWidth(f"{'i' if signed else 'u'}{bits}", bits, signed)
        for signed in (True, False)
        for bits in (8, 16, 32, 64, 128)
    )
}


def resolve_width(width: Union[str, IntWidth]) -> IntWidth:
    if isinstance(width, IntWidth):
        return width
    key = str(width).strip().lower()
    if key not in WIDTHS:
        raise ValueError(f"Ancho de entero desconocido: {width} (disponibles: {', '.join(WIDTHS)})")
    return WIDTHS[key]


def check_magnitude(value: int) -> int:
    """Valida que |value| <= 2**128 - 1 y devuelve la magnitud."""
    magnitude = abs(value)
    if magnitude > MAX_MAGNITUDE:
        raise IntegerRangeError(value)
    return magnitude
