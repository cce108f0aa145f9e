# File: src/txbridge/transactions/service.py
import random
from typing import Optional

from ..config.settings import UpstreamSettings
from ..exceptions import UpstreamPayloadError
from ..upstream.client import UpstreamClient
from .mapper import map_transactions
from .models import TransactionsResponse, UpstreamPayload

DEFAULT_FAILURE_MESSAGE = "Failed to fetch transactions"

class TransactionService:
    def __init__(self, settings: UpstreamSettings, client: UpstreamClient,
                 rng: Optional[random.Random] = None):
        self.settings = settings
        self.client = client
        self.rng = rng

    async def get_transactions(self, address: str) -> TransactionsResponse:
        """Fetch and reshape the transactions of an address.

        An upstream ``success: false`` comes back as a failed envelope;
        everything else that goes wrong is raised.
        """
        base_url = self.settings.require_base_url()
        payload = UpstreamPayload.model_validate(
            await self.client.fetch_transactions(base_url, address)
        )

        if not payload.success:
            message = payload.message or DEFAULT_FAILURE_MESSAGE
            return TransactionsResponse.failure(str(message))

        if not isinstance(payload.transactions, list):
            raise UpstreamPayloadError("Upstream response is missing the transactions list")

        return TransactionsResponse(
            success=True,
            transactions=map_transactions(payload.transactions, self.rng),
        )
