from __future__ import annotations

USER_AGENT = "PathTree-Client/1.0.0"
DEFAULT_TIMEOUT = 10
REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(source: str) -> bool:
    """True when the source string is an HTTP(S) URL."""
    return source.strip().lower().startswith(REMOTE_SCHEMES)
