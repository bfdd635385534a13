"""Success/failure result returned by repository operations."""
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a human-readable error message."""

    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def get_or_raise(self) -> T:
        """Return the value, raising RuntimeError with the message on failure."""
        if self.error is not None:
            raise RuntimeError(self.error)
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        if self.error is not None:
            return Result.failure(self.error)
        return Result.success(fn(self.value))
