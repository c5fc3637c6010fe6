"""Configuration loader: reads TOML defaults then applies env-var overrides."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from filelist.models import ByteDisplay, Config, ConversionPolicy

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "default.toml"


def load_config(config_path: Path | None = None) -> Config:
    """Load listing configuration from a TOML file with env-var overrides.

    Resolution order (later wins):
    1. Defaults in ``config/default.toml``
    2. Values in *config_path* (if provided)
    3. Environment variables: ``FILELIST_TEXT_ENCODING``,
       ``FILELIST_CONVERSION_POLICY``, ``FILELIST_BYTE_DISPLAY``

    Args:
        config_path: Optional path to an additional TOML config file.

    Returns:
        Populated :class:`~filelist.models.Config` instance.

    Raises:
        FileNotFoundError: If *config_path* is given but does not exist.
        ValueError: If the encoding, policy or byte display is not recognised.
    """
    data: dict[str, object] = {}

    # 1. Load built-in defaults.
    if _DEFAULT_CONFIG_PATH.exists():
        with _DEFAULT_CONFIG_PATH.open("rb") as fh:
            data.update(tomllib.load(fh))
        logger.debug("Loaded default config from %s", _DEFAULT_CONFIG_PATH)

    # 2. Overlay user-supplied config file.
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with config_path.open("rb") as fh:
            data.update(tomllib.load(fh))
        logger.debug("Overlaid config from %s", config_path)

    # 3. Environment variable overrides.
    if encoding_env := os.environ.get("FILELIST_TEXT_ENCODING"):
        data["text_encoding"] = encoding_env

    if policy_env := os.environ.get("FILELIST_CONVERSION_POLICY"):
        data["conversion_policy"] = policy_env

    if display_env := os.environ.get("FILELIST_BYTE_DISPLAY"):
        data["byte_display"] = display_env

    text_encoding = str(data.get("text_encoding", "utf-8"))
    try:
        b"".decode(text_encoding)
    except LookupError as exc:
        raise ValueError(f"Unknown text encoding: {text_encoding!r} ({exc})") from None

    policy = str(data.get("conversion_policy", ConversionPolicy.SKIP))
    if policy not in {p.value for p in ConversionPolicy}:
        raise ValueError(
            f"Unknown conversion policy: {policy!r} (expected 'skip' or 'abort')"
        )

    display = str(data.get("byte_display", ByteDisplay.ESCAPE))
    if display not in {d.value for d in ByteDisplay}:
        raise ValueError(
            f"Unknown byte display: {display!r} (expected 'escape' or 'hex')"
        )

    return Config(
        text_encoding=text_encoding,
        conversion_policy=ConversionPolicy(policy),
        byte_display=ByteDisplay(display),
    )
