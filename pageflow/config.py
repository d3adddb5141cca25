import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

K = TypeVar("K")

DEFAULT_CATALOG_URL = "https://gutendex.com"
DEFAULT_CATALOG_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "pageflow/0.1"


def _noop(*args: Any) -> None:
    return None


@dataclass
class PaginatorOptions(Generic[K]):
    """
    Internal container for paginator configuration.
    Supplied once and not mutated after construction.
    """

    initial_key: K
    name: str = "paginator"
    on_loading_changed: Callable[[bool], None] = field(default=_noop)
    on_error: Callable[[BaseException | None], None] = field(default=_noop)
    on_success: Callable[[Any, K], None] = field(default=_noop)

    def __post_init__(self) -> None:
        # Allow explicit None to mean "not interested"
        if self.on_loading_changed is None:
            self.on_loading_changed = _noop
        if self.on_error is None:
            self.on_error = _noop
        if self.on_success is None:
            self.on_success = _noop


@dataclass
class CatalogOptions:
    """
    Connection settings for the book catalog client.

    Attributes:
        base_url: Root URL of the Gutendex-compatible catalog
        timeout: Request timeout in seconds
        user_agent: Value for the User-Agent header
    """

    base_url: str = DEFAULT_CATALOG_URL
    timeout: float = DEFAULT_CATALOG_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "CatalogOptions":
        """
        Build options from PAGEFLOW_CATALOG_URL and PAGEFLOW_CATALOG_TIMEOUT.

        Raises:
            ValueError: If PAGEFLOW_CATALOG_TIMEOUT is not a positive number
        """
        base_url = os.environ.get("PAGEFLOW_CATALOG_URL", DEFAULT_CATALOG_URL)
        raw_timeout = os.environ.get("PAGEFLOW_CATALOG_TIMEOUT")
        timeout = DEFAULT_CATALOG_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(
                    f"PAGEFLOW_CATALOG_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from e
            if timeout <= 0:
                raise ValueError(f"PAGEFLOW_CATALOG_TIMEOUT must be positive, got {timeout}")
        return cls(base_url=base_url.rstrip("/"), timeout=timeout)
