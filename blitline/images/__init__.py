"""Save directives and storage locations for Blitline jobs."""

from .locations import S3Location, AzureLocation
from .saved_image import SavedImage, Builder

__all__ = [
    "S3Location",
    "AzureLocation",
    "SavedImage",
    "Builder",
]
