"""Menu sources."""

from .api import MensaApi
from .base import BaseMenuSource

__all__ = ["BaseMenuSource", "MensaApi"]
