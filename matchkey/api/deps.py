"""FastAPI dependency injection — service factories."""
from __future__ import annotations

from matchkey.core.settings import get_settings
from matchkey.normalizer import Normalizer


def get_normalizer() -> Normalizer:
    """Return a Normalizer configured from the current settings."""
    return Normalizer.from_settings(get_settings())
