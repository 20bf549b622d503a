"""Save directive embedded in a Blitline job description."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .locations import AzureLocation, S3Location
from .payload import compact, hoist_params


logger = logging.getLogger(__name__)

# wire names params can never shadow, present or not
MODELED_FIELDS = frozenset(
    {
        "image_identifier",
        "quality",
        "save_metadata",
        "skip",
        "s3_destination",
        "azure_destination",
        "set_exif",
    }
)


@dataclass(frozen=True)
class SavedImage:
    """
    Where (and whether) a processed image is saved.

    At most one of ``s3_destination`` / ``azure_destination`` may be given;
    with neither, Blitline keeps the result in its own container.

    ``save_metadata`` and ``skip`` default to off and are only ever stored as
    ``True`` or ``None`` so the serialized form never carries ``false``.
    ``params`` are extra fields for server options this client does not model;
    they are written next to ``image_identifier`` rather than nested.
    """

    image_identifier: str
    quality: Optional[int] = None
    save_metadata: Optional[bool] = False
    skip: Optional[bool] = False
    s3_destination: Optional[S3Location] = None
    azure_destination: Optional[AzureLocation] = None
    set_exif: Optional[Dict[str, Any]] = field(default=None, hash=False)
    params: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.s3_destination is not None and self.azure_destination is not None:
            raise ValueError("only one destination location may be specified")

        # only send the flags when they are switched on
        object.__setattr__(self, "save_metadata", True if self.save_metadata else None)
        object.__setattr__(self, "skip", True if self.skip else None)

        object.__setattr__(self, "set_exif", dict(self.set_exif) if self.set_exif else None)
        object.__setattr__(self, "params", dict(self.params) if self.params is not None else None)

    @staticmethod
    def with_id(image_identifier: str) -> "Builder":
        return Builder(image_identifier)

    @property
    def destination(self) -> Optional[Union[S3Location, AzureLocation]]:
        return self.s3_destination or self.azure_destination

    @property
    def destination_kind(self) -> str:
        """One of ``"skip"``, ``"s3"``, ``"azure"`` or ``"blitline"`` (service container)."""
        if self.skip:
            return "skip"
        if self.s3_destination is not None:
            return "s3"
        if self.azure_destination is not None:
            return "azure"
        return "blitline"

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping for this directive."""
        payload = compact(
            {
                "image_identifier": self.image_identifier,
                "quality": self.quality,
                "save_metadata": self.save_metadata,
                "skip": self.skip,
                "s3_destination": self.s3_destination.to_dict() if self.s3_destination else None,
                "azure_destination": self.azure_destination.to_dict() if self.azure_destination else None,
                "set_exif": dict(self.set_exif) if self.set_exif else None,
            }
        )
        return dict(
            hoist_params(
                payload,
                self.params,
                reserved=MODELED_FIELDS,
                owner=f"SavedImage[{self.image_identifier}]",
            )
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


class Builder:
    """
    Fluent builder for :class:`SavedImage`.

    Example::

        SavedImage.with_id("thumb").with_quality(85).with_metadata().to_s3("bucket", "thumb.jpg")

    Every terminal returns a fresh value, so one builder can produce several
    directives. ``but_skip_save`` discards the EXIF headers and params
    collected so far while the other terminals keep them.
    """

    def __init__(self, image_identifier: str):
        self.image_identifier = image_identifier
        self.quality: Optional[int] = None
        self.save_metadata = False
        self.exif: Dict[str, Any] = {}
        self.params: Optional[Dict[str, Any]] = None

    def with_quality(self, quality: int) -> "Builder":
        if isinstance(quality, bool) or not isinstance(quality, int):
            raise TypeError(f"Quality must be an integer, got {quality!r}.")
        self.quality = quality
        return self

    def with_metadata(self) -> "Builder":
        self.save_metadata = True
        return self

    def with_exif_header(self, key: str, value: Any) -> "Builder":
        self.exif[key] = value
        return self

    def with_param(self, key: str, value: Any) -> "Builder":
        if self.params is None:
            self.params = {}
        self.params[key] = value
        return self

    def _exif_or_none(self) -> Optional[Dict[str, Any]]:
        return dict(self.exif) if self.exif else None

    def _params_or_none(self) -> Optional[Dict[str, Any]]:
        return dict(self.params) if self.params is not None else None

    def _build(
        self,
        *,
        s3_destination: Optional[S3Location] = None,
        azure_destination: Optional[AzureLocation] = None,
    ) -> SavedImage:
        saved = SavedImage(
            self.image_identifier,
            quality=self.quality,
            save_metadata=self.save_metadata,
            skip=False,
            s3_destination=s3_destination,
            azure_destination=azure_destination,
            set_exif=self._exif_or_none(),
            params=self._params_or_none(),
        )
        logger.debug(f"SavedImage[{self.image_identifier}]: Built {saved.destination_kind} directive")
        return saved

    def to_s3(self, destination: Union[S3Location, str], key: Optional[str] = None) -> SavedImage:
        """Save to S3, given an :class:`S3Location` or a ``(bucket, key)`` pair."""
        if isinstance(destination, S3Location) and key is None:
            return self._build(s3_destination=destination)
        if isinstance(destination, str) and key is not None:
            return self._build(s3_destination=S3Location.of(destination, key))
        raise TypeError("to_s3 expects an S3Location or a bucket and key.")

    def to_azure(
        self,
        destination: Union[AzureLocation, str],
        shared_access_signature: Optional[str] = None,
    ) -> SavedImage:
        """Save to Azure, given an :class:`AzureLocation` or an account name and signature."""
        if isinstance(destination, AzureLocation) and shared_access_signature is None:
            return self._build(azure_destination=destination)
        if isinstance(destination, str) and shared_access_signature is not None:
            return self._build(azure_destination=AzureLocation.of(destination, shared_access_signature))
        raise TypeError("to_azure expects an AzureLocation or an account name and shared access signature.")

    def to_blitline_container(self) -> SavedImage:
        return self._build()

    def but_skip_save(self) -> SavedImage:
        # headers and params are not carried over when the save is skipped
        saved = SavedImage(
            self.image_identifier,
            quality=self.quality,
            save_metadata=self.save_metadata,
            skip=True,
        )
        logger.debug(f"SavedImage[{self.image_identifier}]: Built skip directive")
        return saved
