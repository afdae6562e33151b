"""Exact smallest-unit arithmetic for on-chain amounts.

Marketplace prices arrive as decimal-digit strings that routinely exceed
2**53, so they are compared as Python int and never pass through float.
Human-unit values from the stats table are rescaled with Decimal.
"""

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext

DEFAULT_DECIMALS = 18
# uint256 max has 78 digits; headroom for the scaled intermediate
_RESCALE_PRECISION = 100


def parse_wei(value: object) -> int:
    """Parse a smallest-unit amount: non-negative, digits only.

    Accepts a digit string or an int. Floats are rejected outright.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"Amount must be an integer digit string, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Amount must be non-negative, got {value}")
        return value
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise ValueError(f"Amount must be a decimal-digit string, got {value!r}")
    return int(value)


def to_smallest_unit(amount: object, decimals: int = DEFAULT_DECIMALS) -> str:
    """Rescale a human-unit decimal to a smallest-unit integer string.

    None → "0". Digits past `decimals` are truncated: 0.5 → "500000000000000000".
    """
    if amount is None:
        return "0"
    try:
        # str() first so a float from a driver keeps its shortest repr
        dec = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValueError(f"Not a decimal amount: {amount!r}") from exc
    if not dec.is_finite():
        raise ValueError(f"Not a finite amount: {amount!r}")
    with localcontext() as ctx:
        ctx.prec = _RESCALE_PRECISION
        scaled = dec.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_DOWN)
    return str(int(scaled))
