"""
Result type returned by page fetches.

A fetch never raises into the paginator: it produces either a value or the
error that prevented it, so the controller can route it to the right callback.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a single fetch.

    Attributes:
        value: The fetched batch (only meaningful on success)
        error: The failure cause, None on success
        ok: Whether the fetch succeeded; keyword-only and required, so a
            Result always states its outcome explicitly
    """

    value: T | None = None
    error: BaseException | None = None
    ok: bool = field(kw_only=True)

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value, error=None, ok=True)

    @classmethod
    def failure(cls, error: BaseException | None = None) -> "Result[T]":
        # error may be None when the source has nothing more specific to say
        return cls(value=None, error=error, ok=False)

    @classmethod
    def catching(cls, func: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T]":
        """Runs func and captures any Exception it raises as a failure."""
        try:
            return cls.success(func(*args, **kwargs))
        except Exception as e:
            return cls.failure(e)

    @classmethod
    async def acatching(
        cls, func: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
    ) -> "Result[T]":
        """Async variant of catching()."""
        try:
            return cls.success(await func(*args, **kwargs))
        except Exception as e:
            return cls.failure(e)

    @property
    def is_success(self) -> bool:
        return self.ok

    @property
    def is_failure(self) -> bool:
        return not self.ok

    def get_or_none(self) -> T | None:
        return self.value if self.ok else None

    def error_or_none(self) -> BaseException | None:
        return None if self.ok else self.error

    def get_or_raise(self) -> T:
        """Returns the value, or raises the captured error."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        if self.error is not None:
            raise self.error
        raise RuntimeError("Result failed without an error")
