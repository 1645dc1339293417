"""Settings and configuration for the minifier."""

import logging
import os
from typing import List
from dataclasses import dataclass, field

from css_inline_minifier.core.symbols import DEFAULT_ALPHABET

_settings_logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Safely parse an integer from an environment variable.

    Args:
        env_var: Name of the environment variable.
        default: Default value as a string.

    Returns:
        Parsed integer value, or default if parsing fails.
    """
    value = os.getenv(env_var, default)
    try:
        return int(value)
    except ValueError:
        _settings_logger.warning("Invalid value '%s' for %s, using default %s", value, env_var, default)
        return int(default)


def _parse_extra_whitelist() -> List[str]:
    """Parse MINIFIER_EXTRA_WHITELIST from environment variable.

    Expects a comma-separated list of class name fragments.
    Example: "js-,is-active,swiper"

    Returns:
        List of entries. Empty list if the variable is not set or blank.
        Whitespace around individual entries is trimmed.
    """
    raw = os.getenv("MINIFIER_EXTRA_WHITELIST", "")
    if not raw:
        return []
    entries = [s.strip() for s in raw.split(",") if s.strip()]
    for entry in entries:
        if any(ch.isspace() for ch in entry):
            _settings_logger.warning("Whitelist entry contains whitespace and can never match a class: %r", entry)
    return entries


@dataclass
class Settings:
    """Configuration settings for the minifier."""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Alias generation
    alphabet: str = field(default_factory=lambda: os.getenv("MINIFIER_ALPHABET", DEFAULT_ALPHABET))
    extra_whitelist: List[str] = field(default_factory=_parse_extra_whitelist)

    # Batch output
    output_suffix: str = field(default_factory=lambda: os.getenv("MINIFIER_OUTPUT_SUFFIX", ".min"))

    # Local server configuration
    server_host: str = field(default_factory=lambda: os.getenv("SERVER_HOST", "0.0.0.0"))
    server_port: int = field(default_factory=lambda: _safe_int("SERVER_PORT", "8000"))
    max_document_bytes: int = field(default_factory=lambda: _safe_int("MAX_DOCUMENT_BYTES", str(5 * 1024 * 1024)))
