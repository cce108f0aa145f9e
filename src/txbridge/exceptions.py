# src/txbridge/exceptions.py

class TxBridgeError(Exception):
    """Base exception class for txbridge errors"""
    pass

class ConfigurationError(TxBridgeError):
    """Raised when required configuration is missing"""
    pass

class UpstreamError(TxBridgeError):
    """Base exception class for upstream service errors"""
    pass

class UpstreamHTTPError(UpstreamError):
    """Raised when the upstream service answers with a non-success status"""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"HTTP error! status: {status}")

class UpstreamPayloadError(UpstreamError):
    """Raised when the upstream body is not the expected JSON document"""
    pass

class TransactionMappingError(TxBridgeError):
    """Raised when an upstream record cannot be mapped"""
    pass
