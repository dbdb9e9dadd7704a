import logging

logger = logging.getLogger(__name__)

# Default and ceiling for the accepted n; keeps recursion well under the
# interpreter's default limit of 1000 frames
DEFAULT_LIMIT = 500


class FactorialError(ValueError):
    """Base class for inputs factorial() refuses."""


class NegativeInputError(FactorialError):
    pass


class InputTooLargeError(FactorialError):
    pass


def factorial(n: int, limit: int = DEFAULT_LIMIT) -> int:
    """
    Return n! computed recursively, with 0! == 1.

    Python ints are arbitrary precision, so the result is always exact.
    Raises NegativeInputError for n < 0, InputTooLargeError for n > limit
    and TypeError for anything that is not an int. A limit outside
    0..DEFAULT_LIMIT raises FactorialError.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial() expects an int, got {type(n).__name__}")
    if not 0 <= limit <= DEFAULT_LIMIT:
        raise FactorialError(f"limit must be between 0 and {DEFAULT_LIMIT}, got {limit}")
    if n < 0:
        raise NegativeInputError(f"factorial() is undefined for negative n ({n})")
    if n > limit:
        raise InputTooLargeError(f"n={n} exceeds the recursion limit of {limit}")

    logger.debug("computing factorial(%d)", n)
    return _factorial(n)


def _factorial(n: int) -> int:
    if n == 0:
        return 1
    return n * _factorial(n - 1)
