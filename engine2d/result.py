"""A container for the outcome of an operation that may fail."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

_OK_MESSAGE = "All good!"


class Result(Generic[T]):
    """Either a successful value or an error message."""

    __slots__ = ("_value", "_has_value", "_error_msg")

    def __init__(self, value: Any = None, has_value: bool = False, error_msg: str = "") -> None:
        self._value = value
        self._has_value = has_value
        self._error_msg = error_msg

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Wrap a successful value."""
        return cls(value, True)

    @classmethod
    def failure(cls, error_msg: str) -> Result[T]:
        """Wrap an error message."""
        return cls(None, False, error_msg)

    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self._has_value

    def value(self) -> T:
        """The wrapped value; raises ValueError on a failed result."""
        if not self._has_value:
            raise ValueError(self._error_msg)
        return self._value

    def error(self) -> str:
        """The error message, or "All good!" on success."""
        return _OK_MESSAGE if self._has_value else self._error_msg

    def __bool__(self) -> bool:
        return self._has_value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self._has_value, self._value, self._error_msg) == (
            other._has_value,
            other._value,
            other._error_msg,
        )

    def __repr__(self) -> str:
        if self._has_value:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error_msg!r})"