# limbint/limbs.py
# Limb sequence: a non-negative integer stored as base-10^19 digit groups,
# least-significant limb first.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import InvalidFormat

LIMB_DIGITS = 19
RADIX = 10 ** LIMB_DIGITS  # largest power of ten below 2^64

# ---------- BigInt ----------

@dataclass(frozen=True)
class BigInt:
    """
    Immutable big integer. value = sum(limbs[i] * RADIX**i).
    Zero is the single limb (0,); nothing else carries a top zero limb.
    """
    limbs: Tuple[int, ...]

    def __post_init__(self):
        limbs = self.limbs
        if not isinstance(limbs, tuple):
            limbs = tuple(limbs)
            object.__setattr__(self, "limbs", limbs)
        if not limbs:
            raise InvalidFormat("a BigInt needs at least one limb")
        for x in limbs:
            if type(x) is not int or not (0 <= x < RADIX):
                raise InvalidFormat(f"limb out of range [0, 10^{LIMB_DIGITS}): {x!r}")
        if len(limbs) > 1 and limbs[-1] == 0:
            raise InvalidFormat("most-significant limb is zero (not normalized)")

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "BigInt":
        """Build from limbs (LS first), stripping superfluous top zero limbs."""
        out = list(limbs)
        while len(out) > 1 and out[-1] == 0:
            out.pop()
        if not out:
            out = [0]
        return cls(tuple(out))

    @classmethod
    def from_small(cls, v: int) -> "BigInt":
        if type(v) is not int or not (0 <= v < RADIX):
            raise InvalidFormat(f"small value must be an int in [0, 10^{LIMB_DIGITS}): {v!r}")
        return cls((v,))

    # -- cheap queries --

    def is_zero(self) -> bool:
        return self.limbs == (0,)

    def is_even(self) -> bool:
        # RADIX is even, so parity lives in the lowest limb
        return self.limbs[0] % 2 == 0

    def limb_count(self) -> int:
        return len(self.limbs)

    def describe(self) -> str:
        """Limb dump, most-significant first, space separated."""
        return " ".join(str(x) for x in reversed(self.limbs))

    def __str__(self) -> str:
        from .codec import format_decimal
        return format_decimal(self)

    def __repr__(self) -> str:
        return f"BigInt({self})"

ZERO = BigInt((0,))
ONE = BigInt((1,))
TWO = BigInt((2,))
THREE = BigInt((3,))
