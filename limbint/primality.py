# limbint/primality.py
# Miller–Rabin probable-prime engine working directly on limbs.
# - random witnesses drawn limb by limb (no collapse to a machine word)
# - n-1 = 2^s * d found by halving on limbs
# - short-circuits on the first witness that proves n composite

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from . import config
from .arith import add, compare, halve, subtract, Ordering
from .codec import parse_decimal
from .errors import InvalidConfiguration, InvalidFormat, InvalidInput
from .limbs import BigInt, RADIX, ONE, TWO, THREE
from .powmod import mul_mod, power_mod

log = logging.getLogger(__name__)

FOUR = BigInt.from_small(4)

class Verdict(Enum):
    PRIME = "prime"                    # definitive (2 or 3)
    PROBABLY_PRIME = "probably_prime"  # survived every trial
    COMPOSITE = "composite"            # definitive

@dataclass
class PrimalityResult:
    verdict: Verdict
    trials: int = 0
    witness: Optional[BigInt] = None
    steps: List[str] = field(default_factory=list)

# ---------- Helpers ----------

def decompose(m: BigInt) -> Tuple[int, BigInt]:
    """Write m = 2^s * d with d odd. m must be nonzero."""
    if m.is_zero():
        raise InvalidInput("cannot factor powers of two out of zero")
    s = 0
    d = m
    while d.is_even():
        d = halve(d)
        s += 1
    return s, d

def random_below(bound: BigInt, rng: random.Random) -> BigInt:
    """
    Uniform BigInt in [0, bound]. Draws one limb at a time, the top limb in
    [0, bound_top], and rejects candidates above bound (at most half of them).
    """
    top = bound.limbs[-1]
    width = len(bound.limbs)
    while True:
        limbs = [rng.randrange(RADIX) for _ in range(width - 1)]
        limbs.append(rng.randrange(top + 1))
        cand = BigInt.from_limbs(limbs)
        if compare(cand, bound) is not Ordering.GREATER:
            return cand

def _subject(n: Union[BigInt, str]) -> BigInt:
    if isinstance(n, BigInt):
        return n
    if isinstance(n, str):
        try:
            return parse_decimal(n.strip())
        except InvalidFormat as e:
            raise InvalidInput(f"primality subject is not a decimal number: {e}") from e
    raise InvalidInput(f"primality subject must be a BigInt or decimal string, got {type(n).__name__}")

def _trials(k: Optional[int]) -> int:
    if k is None:
        k = config.DEFAULT_TRIALS
    if type(k) is not int:
        raise InvalidConfiguration(f"trial count must be an int, got {type(k).__name__}")
    if k < 1:
        raise InvalidConfiguration(f"trial count must be >= 1, got {k}")
    return k

# ---------- Engine ----------

def miller_rabin(n: Union[BigInt, str], k: Optional[int] = None,
                 rng: Optional[random.Random] = None) -> PrimalityResult:
    """
    Run up to k random-base trials on n. Returns PRIME for 2 and 3,
    COMPOSITE as soon as a witness is found, else PROBABLY_PRIME
    (false-positive rate <= 4^-k).
    """
    n = _subject(n)
    k = _trials(k)
    steps: List[str] = []

    if n == TWO or n == THREE:
        steps.append(f"{n} is a small prime")
        return PrimalityResult(Verdict.PRIME, steps=steps)
    if compare(n, ONE) is not Ordering.GREATER or n.is_even():
        steps.append(f"{n} is <= 1 or even")
        return PrimalityResult(Verdict.COMPOSITE, steps=steps)

    n_minus_1 = subtract(n, ONE)
    s, d = decompose(n_minus_1)
    steps.append(f"n-1 = 2^{s} * d, d has {len(str(d))} digits")
    log.debug("miller-rabin: %d limbs, s=%d, k=%d", n.limb_count(), s, k)

    if rng is None:
        rng = config.default_rng()
    span = subtract(n, FOUR)  # bases are 2 + [0, n-4] = [2, n-2]

    for trial in range(1, k + 1):
        a = add(random_below(span, rng), TWO)
        x = power_mod(a, d, n)
        if x == ONE or x == n_minus_1:
            continue
        for _ in range(s - 1):
            x = mul_mod(x, x, n)
            if x == n_minus_1:
                break
        else:
            steps.append(f"trial {trial}: base {a} is a witness")
            log.debug("miller-rabin: composite after %d trial(s)", trial)
            return PrimalityResult(Verdict.COMPOSITE, trials=trial, witness=a, steps=steps)

    steps.append(f"passed {k} trial(s)")
    return PrimalityResult(Verdict.PROBABLY_PRIME, trials=k, steps=steps)

def is_probably_prime(n: Union[BigInt, str], k: Optional[int] = None,
                      rng: Optional[random.Random] = None) -> Verdict:
    return miller_rabin(n, k, rng).verdict

def next_probable_prime(start: Union[BigInt, str], k: Optional[int] = None,
                        rng: Optional[random.Random] = None, *, return_iters=False):
    """Smallest n >= start that the engine does not reject, stepping over evens."""
    n = _subject(start)
    k = _trials(k)
    if compare(n, TWO) is not Ordering.GREATER:
        return (TWO, 0) if return_iters else TWO
    if n.is_even():
        n = add(n, ONE)
    iters = 0
    while True:
        iters += 1
        if miller_rabin(n, k, rng).verdict is not Verdict.COMPOSITE:
            return (n, iters) if return_iters else n
        n = add(n, TWO)
