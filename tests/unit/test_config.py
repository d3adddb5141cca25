"""
Unit tests for configuration containers.
"""

import pytest

from pageflow.config import (
    DEFAULT_CATALOG_TIMEOUT,
    DEFAULT_CATALOG_URL,
    CatalogOptions,
    PaginatorOptions,
)


class TestPaginatorOptions:
    def test_none_callbacks_become_noops(self):
        options = PaginatorOptions(
            initial_key=1, on_loading_changed=None, on_error=None, on_success=None
        )
        # Must be callable without effect
        options.on_loading_changed(True)
        options.on_error(None)
        options.on_success([], 2)
        assert options.initial_key == 1
        assert options.name == "paginator"


class TestCatalogOptions:
    def test_defaults(self):
        options = CatalogOptions()
        assert options.base_url == DEFAULT_CATALOG_URL
        assert options.timeout == DEFAULT_CATALOG_TIMEOUT
        assert options.user_agent == "pageflow/0.1"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PAGEFLOW_CATALOG_URL", "http://localhost:8000/")
        monkeypatch.setenv("PAGEFLOW_CATALOG_TIMEOUT", "2.5")
        options = CatalogOptions.from_env()
        assert options.base_url == "http://localhost:8000"
        assert options.timeout == 2.5

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("PAGEFLOW_CATALOG_URL", raising=False)
        monkeypatch.delenv("PAGEFLOW_CATALOG_TIMEOUT", raising=False)
        assert CatalogOptions.from_env() == CatalogOptions()

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_from_env_rejects_bad_timeout(self, monkeypatch, raw):
        monkeypatch.setenv("PAGEFLOW_CATALOG_TIMEOUT", raw)
        with pytest.raises(ValueError, match="PAGEFLOW_CATALOG_TIMEOUT"):
            CatalogOptions.from_env()
