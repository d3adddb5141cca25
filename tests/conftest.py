"""
Shared pytest fixtures and configuration for Pageflow tests.

Provides callback recorders, scripted page sources and catalog payload
builders used across the unit tests.
"""

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pageflow import Result


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")


class Recorder:
    """Collects every paginator callback in call order."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def on_loading_changed(self, is_loading: bool) -> None:
        self.events.append(("loading", is_loading))

    def on_error(self, error: BaseException | None) -> None:
        self.events.append(("error", error))

    def on_success(self, batch: Any, next_key: Any) -> None:
        self.events.append(("success", batch, next_key))

    def callbacks(self) -> dict[str, Callable[..., None]]:
        return {
            "on_loading_changed": self.on_loading_changed,
            "on_error": self.on_error,
            "on_success": self.on_success,
        }

    def kinds(self) -> list[str]:
        return [event[0] for event in self.events]

    def of_kind(self, kind: str) -> list[tuple[Any, ...]]:
        return [event for event in self.events if event[0] == kind]


class ScriptedSource:
    """
    Async page source returning pre-scripted outcomes.

    `outcomes` maps a key to a Result (or an exception to raise); unknown keys
    succeed with a batch of the form ["item-<key>"]. When `gate` is set,
    every fetch waits on it, which keeps the fetch in flight.
    """

    def __init__(self, outcomes: dict[Any, Any] | None = None) -> None:
        self.outcomes = dict(outcomes or {})
        self.requested: list[Any] = []
        self.gate: asyncio.Event | None = None
        self.started: asyncio.Event | None = None

    async def fetch(self, key: Any) -> Result[list[str]]:
        self.requested.append(key)
        if self.started is not None:
            self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.get(key)
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome is None:
            return Result.success([f"item-{key}"])
        return outcome

    def next_key(self, current_key: int, batch: Any) -> int:
        return current_key + 1


class SyncScriptedSource:
    """Blocking counterpart of ScriptedSource."""

    def __init__(self, outcomes: dict[Any, Any] | None = None) -> None:
        self.outcomes = dict(outcomes or {})
        self.requested: list[Any] = []

    def fetch(self, key: Any) -> Result[list[str]]:
        self.requested.append(key)
        outcome = self.outcomes.get(key)
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome is None:
            return Result.success([f"item-{key}"])
        return outcome

    def next_key(self, current_key: int, batch: Any) -> int:
        return current_key + 1


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def scripted_source() -> ScriptedSource:
    return ScriptedSource()


@pytest.fixture
def sync_source() -> SyncScriptedSource:
    return SyncScriptedSource()


# Catalog fixtures


def make_book(book_id: int, epub: bool = True, title: str | None = None) -> dict[str, Any]:
    """Builds a Gutendex book payload."""
    formats = {
        "text/html": f"https://www.gutenberg.org/ebooks/{book_id}.html.images",
        "image/jpeg": f"https://www.gutenberg.org/cache/epub/{book_id}/pg{book_id}.cover.medium.jpg",
    }
    if epub:
        formats["application/epub+zip"] = f"https://www.gutenberg.org/ebooks/{book_id}.epub3.images"
    return {
        "id": book_id,
        "title": title or f"Book {book_id}",
        "authors": [{"name": "Austen, Jane", "birth_year": 1775, "death_year": 1817}],
        "translators": [],
        "subjects": ["Fiction"],
        "bookshelves": ["Best Books Ever Listings"],
        "languages": ["en"],
        "copyright": False,
        "media_type": "Text",
        "formats": formats,
        "download_count": 1000 + book_id,
    }


def make_book_set(books: list[dict[str, Any]], next_url: str | None = None) -> dict[str, Any]:
    return {"count": len(books), "next": next_url, "previous": None, "results": books}


@pytest.fixture
def book_payload() -> Callable[..., dict[str, Any]]:
    return make_book


@pytest.fixture
def book_set_payload() -> Callable[..., dict[str, Any]]:
    return make_book_set


@pytest.fixture
def catalog_requests() -> list[httpx.Request]:
    """Every request seen by the mocked catalog transport."""
    return []


@pytest.fixture
def mock_catalog(catalog_requests):
    """
    Returns a factory building an httpx.AsyncClient against a mocked catalog.

    The handler receives the request and returns an httpx.Response.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            catalog_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(
            base_url="https://catalog.test", transport=httpx.MockTransport(recording_handler)
        )

    return factory
