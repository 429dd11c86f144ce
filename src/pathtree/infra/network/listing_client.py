from __future__ import annotations

import logging
from typing import List

import requests

from pathtree.domain.errors import SourceReadError
from pathtree.infra.fs import split_lines
from pathtree.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_path_lines(url: str, timeout: int = DEFAULT_TIMEOUT) -> List[str]:
    """
    Download a newline-delimited path listing from a remote host.

    Args:
        url: HTTP(S) location of the listing.
        timeout: Seconds to wait for the server.

    Returns:
        List[str]: The raw lines, in document order.

    Raises:
        SourceReadError: On timeouts, connection errors or non-2xx responses.
    """
    headers = {"User-Agent": USER_AGENT}
    logger.debug(f"Fetching path listing from: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.warning(f"Network: Listing download timed out after {timeout}s.")
        raise SourceReadError(url, f"timed out after {timeout}s") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Communication error while fetching listing: {e}")
        raise SourceReadError(url, str(e)) from e

    lines = split_lines(response.text)
    size_kb = len(response.content) / 1024
    logger.info(f"Network: Path listing received ({len(lines)} lines, {size_kb:.1f} KB).")
    return lines
