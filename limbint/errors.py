# limbint/errors.py
# Error kinds raised by the limb arithmetic and the primality engine.
# Each subclasses a builtin so callers can also catch ValueError & co.

class LimbIntError(Exception):
    """Base class for every limbint error."""

class InvalidFormat(LimbIntError, ValueError):
    """Malformed decimal string or limb sequence."""

class NegativeResult(LimbIntError, ArithmeticError):
    """subtract(a, b) called with a < b; there is no sign to carry it."""

class DivisionByZero(LimbIntError, ZeroDivisionError):
    """Zero modulus or divisor."""

class InvalidInput(LimbIntError, ValueError):
    """Empty or degenerate primality subject."""

class InvalidConfiguration(LimbIntError, ValueError):
    """Trial count < 1 or a malformed setting."""
