import hashlib
import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("pageflow")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_key(key: Any) -> str:
    """
    Redacts cursor values for logging.
    Hashes the value so consecutive log lines can be correlated
    without leaking opaque continuation tokens.
    """
    try:
        if isinstance(key, dict):
            # Sort keys so equal cursors produce equal hashes
            redacted = {}
            for k in sorted(key):
                val_str = str(key[k]).encode("utf-8")
                redacted[k] = hashlib.sha256(val_str).hexdigest()[:8]
            return str(redacted)
        else:
            return hashlib.sha256(str(key).encode("utf-8")).hexdigest()[:8]
    except Exception:
        return "<redaction_failed>"
