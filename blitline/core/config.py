from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from ..images.locations import AzureLocation, S3Location
from ..images.saved_image import Builder


logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when the save defaults file is missing, unreadable or malformed."""


def load_project_config(path: Union[str, Path]) -> dict:
    """Parse the JSON file holding the ``saves`` defaults."""
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Save defaults file not found: {config_path}")
    try:
        config = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Save defaults file {config_path} is not valid JSON: {exc.msg}") from exc
    if not isinstance(config, dict):
        raise ConfigError(f"Save defaults file {config_path} must contain a JSON object.")
    logger.debug(f"Loaded save defaults from {config_path}")
    return config


def _saves_section(config: Mapping[str, object]) -> Mapping[str, object]:
    saves = config.get("saves") if isinstance(config, Mapping) else None
    if saves is None:
        return {}
    if not isinstance(saves, Mapping):
        raise ConfigError("The 'saves' section must be an object.")
    return saves


def builder_from_config(image_identifier: str, config: Mapping[str, object]) -> Builder:
    """
    Return a :class:`Builder` seeded with the defaults under ``saves``.

    Recognised keys: ``quality`` (int), ``saveMetadata`` (bool), ``exif`` and
    ``params`` (objects). Missing keys leave the builder defaults untouched.
    """
    saves = _saves_section(config)
    builder = Builder(image_identifier)

    quality = saves.get("quality")
    if quality is not None:
        if isinstance(quality, bool) or not isinstance(quality, int):
            raise ConfigError(f"'saves.quality' must be an integer, got {quality!r}.")
        builder.with_quality(quality)

    save_metadata = saves.get("saveMetadata", False)
    if not isinstance(save_metadata, bool):
        raise ConfigError("'saves.saveMetadata' must be true or false.")
    if save_metadata:
        builder.with_metadata()

    for section, add in (("exif", builder.with_exif_header), ("params", builder.with_param)):
        values = saves.get(section)
        if values is None:
            continue
        if not isinstance(values, Mapping):
            raise ConfigError(f"'saves.{section}' must be an object.")
        for key, value in values.items():
            add(str(key), value)

    logger.debug(f"Loaded save defaults for {image_identifier}: {sorted(saves)}")
    return builder


def destination_from_config(config: Mapping[str, object]) -> Optional[Union[S3Location, AzureLocation]]:
    """Return the default destination configured under ``saves``, if any."""
    saves = _saves_section(config)
    s3_cfg = saves.get("s3")
    azure_cfg = saves.get("azure")
    if s3_cfg is not None and azure_cfg is not None:
        raise ConfigError("Configure either 'saves.s3' or 'saves.azure', not both.")

    if s3_cfg is not None:
        if not isinstance(s3_cfg, Mapping):
            raise ConfigError("'saves.s3' must be an object with 'bucket'/'key'.")
        try:
            return S3Location.of(str(s3_cfg["bucket"]), str(s3_cfg["key"]))
        except KeyError as exc:
            raise ConfigError(f"'saves.s3' is missing required key {exc}.") from exc

    if azure_cfg is not None:
        if not isinstance(azure_cfg, Mapping):
            raise ConfigError("'saves.azure' must be an object with 'accountName'/'sharedAccessSignature'.")
        try:
            return AzureLocation.of(str(azure_cfg["accountName"]), str(azure_cfg["sharedAccessSignature"]))
        except KeyError as exc:
            raise ConfigError(f"'saves.azure' is missing required key {exc}.") from exc

    return None
