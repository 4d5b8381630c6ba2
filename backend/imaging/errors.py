from __future__ import annotations


class ImageProviderError(Exception):
    """The image transformation provider could not produce an image."""
