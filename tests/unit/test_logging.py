import logging

from pageflow._logging import logger, redact_key


def test_library_logger_has_null_handler():
    assert logger.name == "pageflow"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_redact_key_hashes_scalars():
    redacted = redact_key(42)
    assert redacted != "42"
    assert len(redacted) == 8
    assert redact_key(42) == redacted


def test_redact_key_is_order_independent_for_dicts():
    assert redact_key({"a": 1, "b": "x"}) == redact_key({"b": "x", "a": 1})
    assert "secret-token" not in redact_key({"token": "secret-token"})
