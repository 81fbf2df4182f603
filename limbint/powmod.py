# limbint/powmod.py
# base^exponent mod modulus on limbs, right-to-left binary method.

from __future__ import annotations

from .arith import compare, halve, mod, multiply, Ordering
from .errors import DivisionByZero
from .limbs import BigInt, ONE, ZERO

def mul_mod(a: BigInt, b: BigInt, m: BigInt) -> BigInt:
    """(a * b) mod m. Inputs already below m keep the product under m^2."""
    return mod(multiply(a, b), m)

def power_mod(base: BigInt, exponent: BigInt, modulus: BigInt) -> BigInt:
    """
    Reduce base first, then walk the exponent from its low bit: multiply the
    accumulator in on odd bits, square the base every step, halve the exponent.
    Every product is reduced before the next one, so operands never exceed
    the modulus width.
    """
    if modulus.is_zero():
        raise DivisionByZero("power_mod with zero modulus")
    if compare(modulus, ONE) is Ordering.EQUAL:
        return ZERO

    result = ONE
    base = mod(base, modulus)
    e = exponent
    while not e.is_zero():
        if not e.is_even():
            result = mul_mod(result, base, modulus)
        base = mul_mod(base, base, modulus)
        e = halve(e)
    return result
