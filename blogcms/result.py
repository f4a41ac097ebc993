"""
Success/failure envelope returned by every handler and repository write.

A ``Result`` is either a success carrying an optional value and no
errors, or a failure carrying no value and the list of error messages it
was built from.  ``error`` is the primary (first) message, or ``""``
when a failure was built from an empty list.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Result(Generic[T]):
    is_success: bool
    value: T | None = None
    error: str = ""
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: str | list[str]) -> "Result[T]":
        """Build a failure from one message or a list of messages."""
        if isinstance(error, str):
            return cls(is_success=False, error=error, errors=(error,))
        messages = tuple(error)
        return cls(
            is_success=False,
            error=messages[0] if messages else "",
            errors=messages,
        )

    def match(
        self,
        on_success: Callable[[T | None], R],
        on_failure: Callable[[str], R],
    ) -> R:
        """Call *on_success* with the value or *on_failure* with the error."""
        if self.is_success:
            return on_success(self.value)
        return on_failure(self.error)
