"""Environment-variable-based configuration."""

import os


def get_host() -> str:
    """Return the HTTP bind address from SQLSNAP_HOST."""
    return os.environ.get("SQLSNAP_HOST", "0.0.0.0")


def get_port() -> int:
    """Return the HTTP port from SQLSNAP_PORT."""
    return int(os.environ.get("SQLSNAP_PORT", "9091"))


def get_transport() -> str:
    """Return the server transport (http or stdio) from SQLSNAP_TRANSPORT."""
    return os.environ.get("SQLSNAP_TRANSPORT", "http").lower()


def get_log_level() -> str:
    """Return the logging level from SQLSNAP_LOG_LEVEL."""
    return os.environ.get("SQLSNAP_LOG_LEVEL", "INFO").upper()
