# limbint/arith.py
# Exact limb arithmetic: compare / add / subtract, plus the multiply and
# long-division subset that modular exponentiation needs.

from __future__ import annotations
from enum import Enum
from typing import List, Tuple

from .errors import DivisionByZero, InvalidFormat, NegativeResult
from .limbs import BigInt, RADIX, ZERO

class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

# ---------- Compare / add / subtract ----------

def compare(a: BigInt, b: BigInt) -> Ordering:
    """Limb count first (both normalized), then limbs from the top down."""
    la, lb = len(a.limbs), len(b.limbs)
    if la != lb:
        return Ordering.GREATER if la > lb else Ordering.LESS
    for x, y in zip(reversed(a.limbs), reversed(b.limbs)):
        if x != y:
            return Ordering.GREATER if x > y else Ordering.LESS
    return Ordering.EQUAL

def add(a: BigInt, b: BigInt) -> BigInt:
    xs, ys = a.limbs, b.limbs
    out: List[int] = []
    carry = 0
    i = 0
    while i < len(xs) or i < len(ys) or carry:
        s = carry
        if i < len(xs): s += xs[i]
        if i < len(ys): s += ys[i]
        out.append(s % RADIX)
        carry = s // RADIX
        i += 1
    return BigInt.from_limbs(out)

def subtract(a: BigInt, b: BigInt) -> BigInt:
    """a - b; raises NegativeResult when a < b instead of wrapping."""
    if compare(a, b) is Ordering.LESS:
        raise NegativeResult(f"cannot subtract {b} from smaller {a}")
    xs, ys = a.limbs, b.limbs
    out: List[int] = []
    borrow = 0
    for i, x in enumerate(xs):
        diff = x - (ys[i] if i < len(ys) else 0) - borrow
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    # a >= b, so the final borrow is always 0
    return BigInt.from_limbs(out)

# ---------- Internal multiply / divide ----------

def mul_small(a: BigInt, m: int) -> BigInt:
    """a * m for a single-limb m in [0, RADIX)."""
    if m == 0:
        return ZERO
    out: List[int] = []
    carry = 0
    for x in a.limbs:
        t = x * m + carry
        out.append(t % RADIX)
        carry = t // RADIX
    if carry:
        out.append(carry)
    return BigInt.from_limbs(out)

def multiply(a: BigInt, b: BigInt) -> BigInt:
    """Schoolbook product; every partial stays below RADIX^2 + carry."""
    if a.is_zero() or b.is_zero():
        return ZERO
    xs, ys = a.limbs, b.limbs
    out = [0] * (len(xs) + len(ys))
    for i, x in enumerate(xs):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(ys):
            t = out[i + j] + x * y + carry
            out[i + j] = t % RADIX
            carry = t // RADIX
        k = i + len(ys)
        while carry:
            t = out[k] + carry
            out[k] = t % RADIX
            carry = t // RADIX
            k += 1
    return BigInt.from_limbs(out)

def divmod_small(a: BigInt, d: int) -> Tuple[BigInt, int]:
    """(a // d, a % d) for a single-limb divisor d in (0, RADIX)."""
    if d == 0:
        raise DivisionByZero("division by zero")
    if not (0 < d < RADIX):
        raise InvalidFormat(f"single-limb divisor out of range: {d}")
    q = [0] * len(a.limbs)
    rem = 0
    for i in range(len(a.limbs) - 1, -1, -1):
        cur = rem * RADIX + a.limbs[i]
        q[i] = cur // d
        rem = cur % d
    return BigInt.from_limbs(q), rem

def halve(a: BigInt) -> BigInt:
    return divmod_small(a, 2)[0]

def _shift_in(rem: BigInt, limb: int) -> BigInt:
    """rem * RADIX + limb."""
    if rem.is_zero():
        return BigInt((limb,))
    return BigInt((limb,) + rem.limbs)

def divmod_big(a: BigInt, b: BigInt) -> Tuple[BigInt, BigInt]:
    """
    Schoolbook long division in base RADIX.

    Both operands are scaled so the divisor's top limb is >= RADIX/2; then the
    quotient digit guessed from the top two remainder limbs overshoots by at
    most two and is corrected downward.
    """
    if b.is_zero():
        raise DivisionByZero("division by zero")
    if compare(a, b) is Ordering.LESS:
        return ZERO, a
    if len(b.limbs) == 1:
        q, r = divmod_small(a, b.limbs[0])
        return q, BigInt((r,))

    f = RADIX // (b.limbs[-1] + 1)
    an = mul_small(a, f)
    bn = mul_small(b, f)
    t = len(bn.limbs)
    vtop = bn.limbs[-1]

    digits: List[int] = []
    rem = ZERO
    for limb in reversed(an.limbs):
        rem = _shift_in(rem, limb)
        if compare(rem, bn) is Ordering.LESS:
            digits.append(0)
            continue
        r = rem.limbs
        top = r[t] * RADIX + r[t - 1] if len(r) > t else r[t - 1]
        qhat = min(top // vtop, RADIX - 1)
        prod = mul_small(bn, qhat)
        while compare(prod, rem) is Ordering.GREATER:
            qhat -= 1
            prod = subtract(prod, bn)
        rem = subtract(rem, prod)
        digits.append(qhat)

    digits.reverse()
    # rem = true remainder * f, so this division is exact
    r = divmod_small(rem, f)[0]
    return BigInt.from_limbs(digits), r

def mod(a: BigInt, m: BigInt) -> BigInt:
    return divmod_big(a, m)[1]
