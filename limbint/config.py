# limbint/config.py
# Runtime settings from the environment, read once at import.

from __future__ import annotations
import os, random
from typing import Optional

from .errors import InvalidConfiguration

def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw, 10)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}") from None

def _in_range(name: str, value: int, lo: int = 1, hi: Optional[int] = None) -> int:
    if value < lo or (hi is not None and value > hi):
        bound = f"in [{lo}, {hi}]" if hi is not None else f">= {lo}"
        raise InvalidConfiguration(f"{name} must be {bound}, got {value}")
    return value

DEFAULT_TRIALS  = _in_range("LIMBINT_TRIALS", _env_int("LIMBINT_TRIALS", 10))
SEED            = _env_int("LIMBINT_SEED", None)
MAX_DIGITS      = _in_range("LIMBINT_MAX_DIGITS", _env_int("LIMBINT_MAX_DIGITS", 4096))
# exponentiation cost grows ~cubically with digits; primality / power_mod /
# next_prime requests get the tighter cap
MAX_WORK_DIGITS = _in_range("LIMBINT_MAX_WORK_DIGITS", _env_int("LIMBINT_MAX_WORK_DIGITS", 400))
HOST            = (os.getenv("LIMBINT_HOST") or "127.0.0.1").strip()
PORT            = _in_range("LIMBINT_PORT", _env_int("LIMBINT_PORT", 8082), 1, 65535)

_rng: Optional[random.Random] = None

def default_rng() -> random.Random:
    """
    Process-wide witness generator; seeded from LIMBINT_SEED when set.
    Not locked: threaded callers should use new_rng() per task instead.
    """
    global _rng
    if _rng is None:
        _rng = random.Random(SEED)
    return _rng

def new_rng() -> random.Random:
    """A fresh, unshared generator (seeded from LIMBINT_SEED when set)."""
    return random.Random(SEED)
