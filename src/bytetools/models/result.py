"""Explicit success/failure values.

An empty result and a failed operation must never look the same, so
operations that can fail return ``Ok`` or ``Err`` instead of a sentinel.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result holding ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result holding the ``error`` that caused it."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default):
        return default


Result = Union[Ok[T], Err[E]]
