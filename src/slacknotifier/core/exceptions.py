"""
Slack Notifier - Custom Exceptions
"""

from typing import Any, Dict, Optional


class SlackNotifierError(Exception):
    """Base exception for Slack Notifier."""
    
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class InvalidNotificationError(SlackNotifierError):
    """Raised when input data does not describe a valid notification."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class DeliveryError(SlackNotifierError):
    """Raised when a payload could not be delivered."""
    
    def __init__(
        self,
        message: str,
        code: str = "DELIVERY_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)


class TransportError(DeliveryError):
    """Raised when the outbound request could not be completed."""
    
    def __init__(self, message: str, reason: str = "unknown", host: Optional[str] = None):
        super().__init__(
            message=message,
            code="TRANSPORT_ERROR",
            details={"reason": reason, "host": host},
        )


class DeliveryCancelledError(DeliveryError):
    """
    Raised when the transport aborts an in-flight request.
    
    Cancellation of the calling task is not wrapped; it propagates as
    ``asyncio.CancelledError``.
    """
    
    def __init__(self, message: str = "Delivery cancelled", host: Optional[str] = None):
        super().__init__(
            message=message,
            code="DELIVERY_CANCELLED",
            details={"host": host},
        )
