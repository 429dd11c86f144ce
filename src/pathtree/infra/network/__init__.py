from __future__ import annotations

"""
Network Communication Infrastructure.

Remote path listing retrieval over HTTP(S).
"""

from pathtree.infra.network.common import is_remote_source
from pathtree.infra.network.listing_client import fetch_path_lines

__all__ = [
    "fetch_path_lines",
    "is_remote_source",
]
