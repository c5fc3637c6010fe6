"""List-as-byte-arrays operation: directory entries as raw bytes."""

from __future__ import annotations

import logging

from filelist.encoders import encode_as_byte_arrays
from filelist.errors import ListingError
from filelist.models import Config, OperationDefinition, OutputEncoding
from filelist.reader import read_directory

logger = logging.getLogger(__name__)

DEFINITION = OperationDefinition(
    name="list_as_byte_arrays",
    description=(
        "List the entries of a directory as byte buffers holding each name's "
        "raw bytes, excluding '.' and '..'. Returns None if the directory "
        "cannot be listed."
    ),
    encoding=OutputEncoding.BYTE_ARRAYS,
    host_name="nativeFileListByte",
)


def list_as_byte_arrays(
    path: str | None, config: Config | None = None
) -> list[bytearray] | None:
    """List a directory's entry names as byte buffers.

    *config* is accepted so both operations share one calling convention;
    none of its settings affect a verbatim copy.

    Returns:
        One buffer per entry in OS order, or None on failure.
    """
    try:
        return encode_as_byte_arrays(read_directory(path))
    except ListingError as exc:
        logger.warning(
            "list_as_byte_arrays: %s failure for %r: %s", exc.kind, path, exc
        )
        return None
    except Exception:
        logger.exception("list_as_byte_arrays: unexpected error for %r", path)
        return None
