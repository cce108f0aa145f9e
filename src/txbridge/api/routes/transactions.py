# File: src/txbridge/api/routes/transactions.py
from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from txbridge.config.settings import UpstreamSettings, get_upstream_settings
from txbridge.transactions.models import TransactionsResponse
from txbridge.transactions.service import TransactionService
from txbridge.upstream.client import UpstreamClient
from txbridge.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api")

TRANSACTIONS_PATH = "/api/transactions"

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

def get_upstream_client() -> UpstreamClient:
    return UpstreamClient()

def get_transaction_service(
    settings: UpstreamSettings = Depends(get_upstream_settings),
    client: UpstreamClient = Depends(get_upstream_client),
) -> TransactionService:
    return TransactionService(settings, client)

def envelope(status_code: int, body: TransactionsResponse, **kwargs) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_body(), **kwargs)

def method_not_allowed() -> JSONResponse:
    return envelope(
        405,
        TransactionsResponse.failure("Method not allowed"),
        headers={"Allow": "GET"},
    )

async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Answer verbs the router itself refuses with the same envelope."""
    if exc.status_code == 405 and request.url.path == TRANSACTIONS_PATH:
        return method_not_allowed()
    return await http_exception_handler(request, exc)

@router.api_route("/transactions", methods=ALL_METHODS)
async def get_transactions(
    request: Request,
    service: TransactionService = Depends(get_transaction_service),
):
    if request.method != "GET":
        return method_not_allowed()

    addresses = request.query_params.getlist("address")
    if len(addresses) != 1 or not addresses[0]:
        return envelope(400, TransactionsResponse.failure("Valid address is required"))

    try:
        result = await service.get_transactions(addresses[0])
    except Exception as e:
        logger.error(f"Error fetching transactions: {e!r}")
        return envelope(
            500,
            TransactionsResponse.failure(str(e) or "An unknown error occurred"),
        )

    return envelope(200 if result.success else 400, result)
