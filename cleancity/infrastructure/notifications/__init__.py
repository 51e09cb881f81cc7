"""Push notification delivery for the infrastructure layer."""

from .dispatcher import DeliveryError, DeliveryResult, NotificationDispatcher
from .ntfy import DEFAULT_BASE_URL, NtfyClient, NtfyPublishError

__all__ = [
    "DEFAULT_BASE_URL",
    "DeliveryError",
    "DeliveryResult",
    "NotificationDispatcher",
    "NtfyClient",
    "NtfyPublishError",
]
