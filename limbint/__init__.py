from .errors import (
    DivisionByZero,
    InvalidConfiguration,
    InvalidFormat,
    InvalidInput,
    LimbIntError,
    NegativeResult,
)
from .limbs import BigInt, LIMB_DIGITS, RADIX, ZERO, ONE, TWO, THREE
from .codec import parse_decimal, format_decimal
from .arith import Ordering, add, compare, subtract
from .powmod import power_mod
from .primality import (
    PrimalityResult,
    Verdict,
    is_probably_prime,
    miller_rabin,
    next_probable_prime,
)
__all__ = [
    "BigInt", "LIMB_DIGITS", "RADIX", "ZERO", "ONE", "TWO", "THREE",
    "parse_decimal", "format_decimal",
    "Ordering", "add", "compare", "subtract", "power_mod",
    "PrimalityResult", "Verdict", "is_probably_prime", "miller_rabin", "next_probable_prime",
    "LimbIntError", "InvalidFormat", "NegativeResult", "DivisionByZero",
    "InvalidInput", "InvalidConfiguration",
]
