"""Result values returned by application services.

Services never raise for business failures; they return ``Ok`` or
``Err`` and the caller decides how to surface each variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from catalog.domain.exceptions import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: DomainException

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]
