import secrets
import string
from decimal import Decimal, ROUND_HALF_UP, getcontext, InvalidOperation

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")

# balances inside this band around zero count as settled
DEAD_ZONE = Decimal("0.009")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Not a number: {value!r}")
    # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
    return Decimal(str(value))


def round2(value) -> Decimal:
    """
    Round a money value to cents, half away from zero.
    """
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def to_float(value: Decimal) -> float:
    # + 0.0 turns -0.0 into 0.0
    return float(round2(value)) + 0.0


def generate_id(prefix: str = "", length: int = 6) -> str:
    return prefix + "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))
