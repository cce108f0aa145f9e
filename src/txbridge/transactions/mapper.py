# File: src/txbridge/transactions/mapper.py
"""Reshape upstream transaction records for the frontend.

Upstream sends ``amount`` and ``timestamp`` as strings; they are coerced to
numbers here.  ``hash``, ``block`` and ``fee`` are display-only fields the
frontend always expects, so when upstream leaves one out a placeholder is
made up from the random source.  The placeholders carry no meaning.
"""

import math
import random
import re
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..exceptions import TransactionMappingError
from .models import Transaction, UpstreamTransaction

MAX_PLACEHOLDER_BLOCK = 1_000_000
MAX_PLACEHOLDER_FEE = 0.01

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def parse_amount(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise TransactionMappingError(f"Invalid amount in upstream transaction: {value!r}")
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise TransactionMappingError(f"Invalid amount in upstream transaction: {value!r}")
    if not math.isfinite(amount):
        raise TransactionMappingError(f"Invalid amount in upstream transaction: {value!r}")
    return amount


def parse_timestamp(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        return int(value.strip(), 10)
    raise TransactionMappingError(f"Invalid timestamp in upstream transaction: {value!r}")


def synthesize_hash(rng=random) -> str:
    return "0x%08x..." % rng.getrandbits(32)


def synthesize_block(rng=random) -> str:
    return str(rng.randrange(MAX_PLACEHOLDER_BLOCK))


def synthesize_fee(rng=random) -> str:
    return f"{rng.random() * MAX_PLACEHOLDER_FEE:.6f}"


def map_transaction(record: Any, rng: Optional[random.Random] = None) -> Transaction:
    """Map one upstream record to a :class:`Transaction`."""
    rng = rng or random
    if isinstance(record, UpstreamTransaction):
        upstream = record
    else:
        try:
            upstream = UpstreamTransaction.model_validate(record)
        except ValidationError as e:
            fields = ", ".join(dict.fromkeys(
                str(error["loc"][0]) if error["loc"] else "record" for error in e.errors()
            ))
            raise TransactionMappingError(f"Invalid upstream transaction: bad {fields}") from e

    return Transaction(
        from_address=upstream.from_address,
        to_address=upstream.to_address,
        amount=parse_amount(upstream.amount),
        timestamp=parse_timestamp(upstream.timestamp),
        hash=str(upstream.hash) if upstream.hash else synthesize_hash(rng),
        block=str(upstream.block) if upstream.block else synthesize_block(rng),
        fee=str(upstream.fee) if upstream.fee else synthesize_fee(rng),
    )


def map_transactions(records: Iterable[Any], rng: Optional[random.Random] = None) -> List[Transaction]:
    """Map every record; one bad record fails the whole batch."""
    return [map_transaction(record, rng) for record in records]
