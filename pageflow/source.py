"""
Page sources: the capability a paginator fetches through.

A source knows how to fetch one batch for a cursor and how to derive the
cursor that follows a successful batch. The paginator never looks inside
either.
"""

from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from .exceptions import ConfigurationError

K = TypeVar("K")
T = TypeVar("T")


@runtime_checkable
class PageSource(Protocol[K, T]):
    """
    Capability interface consumed by the paginators.

    fetch() may be a plain function or a coroutine function. It should not
    raise: failures are reported as Result.failure(...). The paginators still
    capture stray exceptions so a misbehaving source cannot break them.
    """

    def fetch(self, key: K) -> Any: ...

    def next_key(self, current_key: K, batch: T) -> K: ...


class CallbackSource(Generic[K, T]):
    """
    Adapts two free callables to the PageSource interface.

    Usage:
        source = CallbackSource(
            on_request=lambda page: api.get_page(page),
            get_next_key=lambda page, batch: page + 1,
        )
    """

    def __init__(
        self,
        on_request: Callable[[K], Any] | None,
        get_next_key: Callable[[K, T], K] | None,
    ) -> None:
        if on_request is None:
            raise ConfigurationError("A page source needs an 'on_request' callable", "on_request")
        if get_next_key is None:
            raise ConfigurationError(
                "A page source needs a 'get_next_key' callable", "get_next_key"
            )
        self._on_request = on_request
        self._get_next_key = get_next_key

    def fetch(self, key: K) -> Any:
        return self._on_request(key)

    def next_key(self, current_key: K, batch: T) -> K:
        return self._get_next_key(current_key, batch)


def increment_page(current_key: int, batch: Any) -> int:
    """Default next-key rule for numbered pages: the page after the current one."""
    return current_key + 1
