"""
Incremental pagination controllers.

A paginator drives "load more" consumption of a paged source. It owns the
cursor and a single-flight guard, and reports everything else through the
callbacks it was configured with:

    loading(True) -> fetch(key) -> on_success(batch, next) | on_error(err) -> loading(False)

The caller never needs to know how fetching works, and the paginator never
holds the accumulated items: the owner merges each batch into its own state.
"""

import inspect
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Generic, TypeVar

from ._logging import logger, redact_key
from .config import PaginatorOptions
from .result import Result
from .source import CallbackSource, PageSource

K = TypeVar("K")
T = TypeVar("T")


class _PaginatorCore(Generic[K, T]):
    """
    State and bookkeeping shared by the async and threaded paginators.

    Every advance captures the current generation. reset() bumps it, so a
    fetch that settles after a reset is recognised as stale and dropped
    without touching callbacks, cursor or guard.
    """

    def __init__(
        self,
        initial_key: K,
        source: PageSource[K, T] | None = None,
        *,
        on_request: Callable[[K], Any] | None = None,
        get_next_key: Callable[[K, T], K] | None = None,
        on_loading_changed: Callable[[bool], None] | None = None,
        on_error: Callable[[BaseException | None], None] | None = None,
        on_success: Callable[[T, K], None] | None = None,
        name: str | None = None,
    ) -> None:
        if source is None:
            # Raises ConfigurationError when either callable is missing
            source = CallbackSource(on_request, get_next_key)

        self._source = source
        self._options: PaginatorOptions[K] = PaginatorOptions(
            initial_key=initial_key,
            name=name or type(self).__name__,
            on_loading_changed=on_loading_changed,  # type: ignore[arg-type]
            on_error=on_error,  # type: ignore[arg-type]
            on_success=on_success,  # type: ignore[arg-type]
        )

        self._current_key: K = initial_key
        self._is_loading = False
        self._generation = 0

    # --- STATE ---

    @property
    def name(self) -> str:
        return self._options.name

    @property
    def initial_key(self) -> K:
        return self._options.initial_key

    @property
    def current_key(self) -> K:
        return self._current_key

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def generation(self) -> int:
        return self._generation

    def _guard(self) -> AbstractContextManager[Any]:
        return nullcontext()

    def _log_extra(self, key: Any, generation: int) -> dict[str, Any]:
        return {"paginator": self.name, "key_hash": redact_key(key), "generation": generation}

    # --- PROTOCOL STEPS ---

    def _start(self) -> tuple[int, K] | None:
        """
        Claims the single-flight guard.
        Returns (generation, key) for the new fetch, or None if one is already running.
        """
        with self._guard():
            if self._is_loading:
                logger.debug(
                    "Fetch already in flight, skipping advance",
                    extra=self._log_extra(self._current_key, self._generation),
                )
                return None
            self._is_loading = True
            generation, key = self._generation, self._current_key
            try:
                self._options.on_loading_changed(True)
            except BaseException:
                self._is_loading = False
                raise

        logger.info("Fetching page", extra=self._log_extra(key, generation))
        return generation, key

    def _complete(self, generation: int, key: K, result: Result[T]) -> bool:
        """
        Routes a settled fetch to the callbacks and moves the cursor on success.
        Returns False if the result was discarded as stale.
        """
        with self._guard():
            if generation != self._generation:
                logger.warning(
                    "Discarding stale page result after reset",
                    extra={
                        **self._log_extra(key, generation),
                        "current_generation": self._generation,
                        "succeeded": result.is_success,
                    },
                )
                return False

            try:
                if result.is_success:
                    batch = result.value
                    next_key = self._source.next_key(key, batch)  # type: ignore[arg-type]
                    self._options.on_success(batch, next_key)
                    self._current_key = next_key
                    logger.info(
                        "Page fetched",
                        extra={
                            **self._log_extra(key, generation),
                            "next_key_hash": redact_key(next_key),
                        },
                    )
                else:
                    logger.warning(
                        "Page fetch failed",
                        extra={**self._log_extra(key, generation), "error": repr(result.error)},
                    )
                    self._options.on_error(result.error)
            finally:
                self._is_loading = False
                self._options.on_loading_changed(False)
            return True

    def _abandon(self, generation: int) -> None:
        """Releases the guard for a fetch that never produced a result (e.g. cancelled)."""
        with self._guard():
            if generation == self._generation and self._is_loading:
                self._is_loading = False
                self._options.on_loading_changed(False)

    def reset(self) -> None:
        """
        Returns to the initial cursor and clears the in-flight guard.

        An outstanding fetch is not cancelled, but its result will be
        discarded when it arrives. If one was in flight, observers are told
        loading stopped; the stale completion itself stays silent.
        """
        with self._guard():
            was_loading = self._is_loading
            self._generation += 1
            self._is_loading = False
            self._current_key = self._options.initial_key
            logger.info(
                "Paginator reset",
                extra=self._log_extra(self._current_key, self._generation),
            )
            if was_loading:
                self._options.on_loading_changed(False)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, current_key={self._current_key!r}, "
            f"is_loading={self._is_loading}, generation={self._generation})"
        )


class Paginator(_PaginatorCore[K, T]):
    """
    Asyncio paginator for single-threaded cooperative callers.

    The in-flight guard is a plain flag: on one event loop nothing can run
    between the check and the set, so concurrent advance() tasks are safe.

    Usage:
        paginator = Paginator(
            initial_key=1,
            on_request=api.get_page,           # sync or async, returns Result
            get_next_key=lambda page, batch: page + 1,
            on_loading_changed=lambda loading: ...,
            on_success=lambda batch, next_page: ...,
            on_error=lambda err: ...,
        )
        await paginator.advance()
    """

    async def advance(self) -> bool:
        """
        Fetches the batch for the current cursor.

        Returns:
            True if a fetch was performed (whatever its outcome), False if
            another fetch was already in flight.
        """
        claimed = self._start()
        if claimed is None:
            return False
        generation, key = claimed

        settled = False
        try:
            result = await self._fetch(key)
            settled = True
        finally:
            if not settled:
                self._abandon(generation)

        self._complete(generation, key, result)
        return True

    load_next_items = advance

    async def _fetch(self, key: K) -> Result[T]:
        try:
            outcome = self._source.fetch(key)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as e:
            return Result.failure(e)

        if not isinstance(outcome, Result):
            return Result.success(outcome)
        return outcome


class ThreadedPaginator(_PaginatorCore[K, T]):
    """
    Blocking paginator safe to call from several threads.

    The check-and-set of the in-flight guard happens under a lock, so at most
    one fetch runs even when advance() races across threads. The fetch itself
    runs outside the lock; callbacks run inside it.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        # Reentrant so callbacks may call reset() or read state
        self._lock = threading.RLock()

    def _guard(self) -> AbstractContextManager[Any]:
        return self._lock

    def advance(self) -> bool:
        """
        Fetches the batch for the current cursor, blocking until it settles.

        Returns:
            True if a fetch was performed, False if one was already in flight.
        """
        claimed = self._start()
        if claimed is None:
            return False
        generation, key = claimed

        settled = False
        try:
            result = self._fetch(key)
            settled = True
        finally:
            if not settled:
                self._abandon(generation)

        self._complete(generation, key, result)
        return True

    load_next_items = advance

    def _fetch(self, key: K) -> Result[T]:
        try:
            outcome = self._source.fetch(key)
        except Exception as e:
            return Result.failure(e)

        if inspect.isawaitable(outcome):
            close = getattr(outcome, "close", None)
            if close is not None:
                close()
            return Result.failure(
                TypeError(f"{self.name} needs a synchronous page source, got an awaitable")
            )
        if not isinstance(outcome, Result):
            return Result.success(outcome)
        return outcome
