"""Result encoders: turn raw entry names into the shapes handed to the host."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from filelist.errors import (
    AllocationFailureError,
    BoundaryAssignmentError,
    ElementConversionError,
)
from filelist.models import ConversionPolicy

logger = logging.getLogger(__name__)

# Converts one raw entry name to text. Raises ElementConversionError (or
# ValueError) for a name it cannot convert, and BoundaryAssignmentError when
# the host rejects the converted element.
Converter = Callable[[bytes], str]


def make_text_converter(encoding: str = "utf-8") -> Converter:
    """Build a strict bytes-to-text converter for *encoding*.

    Args:
        encoding: Name of a text encoding.

    Returns:
        A converter raising :class:`~filelist.errors.ElementConversionError`
        for names that are not valid in *encoding*.

    Raises:
        LookupError: If *encoding* is unknown or is not a text encoding
            (``rot13``, ``hex``, ``zlib`` and other bytes-to-bytes codecs).
    """
    # bytes.decode() only accepts codecs that produce str.
    b"".decode(encoding)

    def convert(name: bytes) -> str:
        try:
            return name.decode(encoding, "strict")
        except UnicodeDecodeError as exc:
            raise ElementConversionError(
                f"entry {name!r} is not valid {encoding}"
            ) from exc

    return convert


def _allocate(count: int) -> list[Any]:
    try:
        return [None] * count
    except MemoryError as exc:
        raise AllocationFailureError(
            f"cannot allocate result for {count} entries"
        ) from exc


def _convert(converter: Converter, name: bytes) -> str:
    try:
        text = converter(name)
    except ElementConversionError:
        raise
    except ValueError as exc:
        raise ElementConversionError(f"cannot convert entry {name!r}: {exc}") from exc
    if not isinstance(text, str):
        raise ElementConversionError(
            f"converter returned {type(text).__name__} for entry {name!r}"
        )
    return text


def encode_as_strings(
    entries: Sequence[bytes],
    converter: Converter | None = None,
    policy: ConversionPolicy = ConversionPolicy.SKIP,
) -> list[str]:
    """Convert entry names to text strings.

    Under :attr:`ConversionPolicy.SKIP` an entry that fails to convert, or
    whose converted value cannot be placed into the result, is left out and
    the remaining entries are still returned. Under
    :attr:`ConversionPolicy.ABORT` the first such failure ends the call.

    Args:
        entries: Raw entry names in enumeration order.
        converter: Bytes-to-text conversion; defaults to strict UTF-8. A
            converter bridging to a host container raises
            :class:`~filelist.errors.BoundaryAssignmentError` when the host
            refuses the element; this list itself never refuses one.
        policy: Per-element failure policy.

    Returns:
        Converted names in enumeration order. May be shorter than *entries*.

    Raises:
        AllocationFailureError: If the result container cannot be created.
        ElementConversionError: Under ``ABORT``, on the first bad entry.
        BoundaryAssignmentError: Under ``ABORT``, on the first failed
            placement.
    """
    convert = converter if converter is not None else make_text_converter()
    result = _allocate(len(entries))
    filled = 0

    for index, name in enumerate(entries):
        try:
            result[filled] = _convert(convert, name)
        except (ElementConversionError, BoundaryAssignmentError) as exc:
            if policy == ConversionPolicy.ABORT:
                logger.debug("encode_as_strings: aborting at entry %d: %s", index, exc)
                raise
            logger.debug("encode_as_strings: skipping entry %d: %s", index, exc)
            continue
        filled += 1

    del result[filled:]
    logger.debug(
        "encode_as_strings: %d of %d entries converted", filled, len(entries)
    )
    return result


def encode_as_byte_arrays(entries: Sequence[bytes]) -> list[bytearray]:
    """Copy each entry name verbatim into a new byte buffer.

    Args:
        entries: Raw entry names in enumeration order.

    Returns:
        One buffer per entry, same order, same bytes.

    Raises:
        AllocationFailureError: If the result container cannot be created.
    """
    result = _allocate(len(entries))
    for index, name in enumerate(entries):
        result[index] = bytearray(name)
    logger.debug("encode_as_byte_arrays: %d entries copied", len(result))
    return result
