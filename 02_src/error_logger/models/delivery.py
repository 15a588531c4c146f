"""Remote delivery outcome model."""

from dataclasses import dataclass


@dataclass
class DeliveryResult:
    """Terminal outcome of one remote delivery."""

    ok: bool
    status_code: int | None = None  # None when no response was received
    error: str | None = None
