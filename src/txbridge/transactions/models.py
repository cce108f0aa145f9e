# File: src/txbridge/transactions/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union

class UpstreamTransaction(BaseModel):
    """A record as the upstream service sends it; numbers arrive as strings."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    amount: Optional[Union[str, float, int]] = None
    timestamp: Optional[Union[str, float, int]] = None
    hash: Optional[Union[str, int]] = None
    block: Optional[Union[str, int]] = None
    fee: Optional[Union[str, float, int]] = None

class Transaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_address: str = Field(alias="from")
    to_address: str = Field(alias="to")
    amount: float
    timestamp: int
    hash: str
    block: str
    fee: str

class UpstreamPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: Any = False
    transactions: Any = None
    message: Any = None

class TransactionsResponse(BaseModel):
    """Envelope returned to the frontend."""
    success: bool
    transactions: Optional[List[Transaction]] = None
    message: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "TransactionsResponse":
        return cls(success=False, message=message)

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
