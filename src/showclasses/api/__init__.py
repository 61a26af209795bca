"""Show management API access."""

from showclasses.api.client import ShowClient
from showclasses.api.decoder import decode_classes, decode_trips, ensure_success

__all__ = [
    "ShowClient",
    "decode_classes",
    "decode_trips",
    "ensure_success",
]
