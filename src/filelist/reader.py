"""Directory reader: enumerates the raw entry names of a single directory."""

from __future__ import annotations

import logging
import os

from filelist.errors import PathUnusableError, ReadFailureError

logger = logging.getLogger(__name__)

# Pseudo-entries some platforms report alongside the real ones.
_PSEUDO_ENTRIES = frozenset({b".", b".."})


def _encode_path(path: str | None) -> bytes:
    """Turn the caller's text path into the bytes handed to the OS.

    Args:
        path: Directory path as supplied by the host.

    Returns:
        The path in the filesystem encoding.

    Raises:
        PathUnusableError: If *path* is missing, empty or not representable.
    """
    if not isinstance(path, str) or not path:
        raise PathUnusableError(f"path must be a non-empty string, got {path!r}")
    try:
        return os.fsencode(path)
    except UnicodeEncodeError as exc:
        raise PathUnusableError(f"path is not representable: {path!r}") from exc


def read_directory(path: str | None) -> list[bytes]:
    """Read the entry names of a directory in the order the OS returns them.

    ``.`` and ``..`` are dropped; nothing else is filtered. The directory
    handle is closed on every exit path.

    Args:
        path: Directory to list.

    Returns:
        Raw entry names.

    Raises:
        PathUnusableError: If the path is unusable or cannot be opened.
        ReadFailureError: If enumeration fails part-way. Entries read before
            the failure are discarded.
    """
    raw_path = _encode_path(path)

    try:
        scanner = os.scandir(raw_path)
    except ValueError as exc:
        # Embedded NUL bytes.
        raise PathUnusableError(f"path is not representable: {path!r}") from exc
    except OSError as exc:
        logger.debug("read_directory: cannot open %s: %s", path, exc)
        raise PathUnusableError(f"cannot open directory {path!r}: {exc}") from exc

    entries: list[bytes] = []
    with scanner:
        try:
            for entry in scanner:
                if entry.name not in _PSEUDO_ENTRIES:
                    entries.append(entry.name)
        except OSError as exc:
            logger.debug(
                "read_directory: read error in %s after %d entries: %s",
                path,
                len(entries),
                exc,
            )
            raise ReadFailureError(f"error reading directory {path!r}: {exc}") from exc

    logger.debug("read_directory: %d entries in %s", len(entries), path)
    return entries
