import re
from typing import Callable, Optional

from intname.naming import integer_name
from intname.utils.logging import get_logger
from intname.widths import IntegerRangeError

_number_re = re.compile(r"(?<![\w\d])(\d+)(?![\w\d])")

logger = get_logger(__name__)


def normalize_numbers(
    text: str,
    converter: Optional[Callable[[int], str]] = None,
    max_value: Optional[int] = None,
    keep_hyphens: Optional[bool] = None,
) -> str:
    """Convierte enteros aislados a palabras en inglés.
    "I have 42 cats" -> "I have forty-two cats".
    Mantiene las cifras de números mayores que max_value (por defecto settings).
    """
    if not text or not any(ch.isdigit() for ch in text):
        return text

    from intname.config import settings

    conv = converter or integer_name
    limit = settings.TEXT_NORM_MAX_VALUE if max_value is None else max_value
    hyphens = settings.TEXT_NORM_KEEP_HYPHENS if keep_hyphens is None else keep_hyphens
    max_digits = len(str(limit))

    def _rep(m: re.Match) -> str:
        raw = m.group(1)
        if len(raw.lstrip("0")) > max_digits:
            return raw
        try:
            n = int(raw)
        except ValueError:
            return raw
        if n > limit:  # evita textos gigantescos
            return raw
        try:
            w = conv(n)
        except IntegerRangeError as e:
            logger.debug(f"Se deja en cifras: {e}", extra={"source": "text_norm"})
            return raw
        return w if hyphens else w.replace('-', ' ')
    return _number_re.sub(_rep, text)
