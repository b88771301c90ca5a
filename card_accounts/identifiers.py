"""
Identifier Generation Module

Produces account and card numbers as fixed-length digit strings.
Random identifiers are NOT cryptographically secure and NOT guaranteed
unique; callers that need uniqueness must deduplicate externally.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Optional
import random


class IdentifierSource(ABC):
    """Abstract source of digit-string identifiers"""

    @abstractmethod
    def digits(self, length: int) -> str:
        """Return an identifier of exactly `length` decimal digits"""
        pass


class RandomDigitSource(IdentifierSource):
    """Uniform random digits, optionally seeded for reproducible runs"""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def digits(self, length: int) -> str:
        _check_length(length)
        return "".join(str(self._random.randrange(10)) for _ in range(length))


class SequenceIdentifierSource(IdentifierSource):
    """
    Hands out caller-supplied identifiers in order.
    Used where identifiers must be deterministic, e.g. in tests.
    """

    def __init__(self, identifiers: Iterable[str]):
        self._identifiers: Iterator[str] = iter(identifiers)

    def digits(self, length: int) -> str:
        _check_length(length)
        try:
            value = next(self._identifiers)
        except StopIteration:
            raise ValueError("Identifier sequence exhausted")

        if len(value) != length or not value.isdigit():
            raise ValueError(f"Identifier '{value}' is not a {length}-digit string")
        return value


def _check_length(length: int) -> None:
    if length <= 0:
        raise ValueError("Identifier length must be positive")


_default_source = RandomDigitSource()


def get_default_source() -> IdentifierSource:
    """Get the process-wide random identifier source"""
    return _default_source


def generate_random_number(length: int) -> str:
    """Generate a random digit string of the given length"""
    return _default_source.digits(length)
