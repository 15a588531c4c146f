"""Core data models for error-logger."""

from .delivery import DeliveryResult
from .events import ErrorEvent, ErrorRecord

__all__ = [
    # Events
    "ErrorEvent",
    "ErrorRecord",
    # Delivery
    "DeliveryResult",
]
