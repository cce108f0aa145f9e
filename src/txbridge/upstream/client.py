# File: src/txbridge/upstream/client.py

import json
from typing import Any, Dict
from urllib.parse import quote

import aiohttp
from yarl import URL

from ..exceptions import UpstreamHTTPError, UpstreamPayloadError
from ..utils.logger import get_logger

logger = get_logger(__name__)

TRANSACTIONS_PATH = "/api/transactions"

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


def build_transactions_url(base_url: str, address: str) -> str:
    return f"{base_url.rstrip('/')}{TRANSACTIONS_PATH}?address={encode_component(address)}"


class UpstreamClient:
    """Talks to the upstream transaction service.

    One session and one GET per call, no retries.  No timeout is set, so
    aiohttp's default applies.
    """

    async def fetch_transactions(self, base_url: str, address: str) -> Dict[str, Any]:
        url = build_transactions_url(base_url, address)
        logger.debug(f"Fetching transactions from {url}")

        async with aiohttp.ClientSession() as session:
            # The query is already encoded; stop yarl from re-quoting it
            async with session.get(URL(url, encoded=True)) as response:
                if not 200 <= response.status < 300:
                    raise UpstreamHTTPError(response.status)
                try:
                    data = await response.json(content_type=None)
                except (json.JSONDecodeError, UnicodeDecodeError) as e:
                    raise UpstreamPayloadError(f"Upstream returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamPayloadError("Upstream returned an unexpected JSON document")
        return data
