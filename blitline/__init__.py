"""Client-side models for Blitline image job payloads."""

from .images import AzureLocation, Builder, S3Location, SavedImage

__all__ = [
    "AzureLocation",
    "Builder",
    "S3Location",
    "SavedImage",
]
