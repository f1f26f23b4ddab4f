"""Explicit present/absent wrapper for optional live references."""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Bound(Generic[T]):
    """A live reference."""
    value: T


@dataclass(frozen=True)
class Unbound:
    """No reference attached yet, or the previous one was discarded."""

    def __bool__(self) -> bool:
        return False


UNBOUND = Unbound()

Binding = Union[Bound[T], Unbound]


def unwrap(binding: "Binding[T]") -> Optional[T]:
    """Return the bound value or ``None``."""
    return binding.value if isinstance(binding, Bound) else None
