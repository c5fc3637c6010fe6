"""List-as-strings operation: directory entries as text."""

from __future__ import annotations

import logging

from filelist.encoders import encode_as_strings, make_text_converter
from filelist.errors import ListingError
from filelist.models import Config, OperationDefinition, OutputEncoding
from filelist.reader import read_directory

logger = logging.getLogger(__name__)

DEFINITION = OperationDefinition(
    name="list_as_strings",
    description=(
        "List the entries of a directory as text strings, excluding '.' and "
        "'..'. Entries whose names are not valid text are left out. "
        "Returns None if the directory cannot be listed."
    ),
    encoding=OutputEncoding.STRINGS,
    host_name="nativeFileList",
)


def list_as_strings(path: str | None, config: Config | None = None) -> list[str] | None:
    """List a directory's entry names as strings.

    Args:
        path: Directory to list.
        config: Runtime configuration; defaults to :class:`Config` defaults.

    Returns:
        Entry names in OS order, or None on failure.
    """
    cfg = config if config is not None else Config()
    try:
        entries = read_directory(path)
        converter = make_text_converter(cfg.text_encoding)
        return encode_as_strings(entries, converter, cfg.conversion_policy)
    except ListingError as exc:
        logger.warning("list_as_strings: %s failure for %r: %s", exc.kind, path, exc)
        return None
    except Exception:
        logger.exception("list_as_strings: unexpected error for %r", path)
        return None
