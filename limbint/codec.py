# limbint/codec.py
# Decimal string <-> limb sequence.

from __future__ import annotations

from .errors import InvalidFormat
from .limbs import BigInt, LIMB_DIGITS

_DIGITS = frozenset("0123456789")

def parse_decimal(s: str) -> BigInt:
    """
    Split the digit string into 19-digit groups from the least-significant
    end; the leading group may be shorter. Leading zeros are normalized away.
    """
    if not isinstance(s, str):
        raise InvalidFormat(f"expected a decimal string, got {type(s).__name__}")
    if not s:
        raise InvalidFormat("empty decimal string")
    # str.isdigit() accepts things like '²' and Arabic-Indic digits; be strict
    bad = [ch for ch in s if ch not in _DIGITS]
    if bad:
        raise InvalidFormat(f"non-digit character {bad[0]!r} in decimal string")

    limbs = []
    end = len(s)
    while end > 0:
        start = max(0, end - LIMB_DIGITS)
        limbs.append(int(s[start:end]))
        end = start
    return BigInt.from_limbs(limbs)

def format_decimal(n: BigInt) -> str:
    """Canonical decimal: top limb as-is, every lower limb padded to 19 digits."""
    limbs = n.limbs
    parts = [str(limbs[-1])]
    for x in reversed(limbs[:-1]):
        parts.append(str(x).zfill(LIMB_DIGITS))
    return "".join(parts)
