"""Shared dataclasses and enums for directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OutputEncoding(StrEnum):
    """Shape of the result handed back to the host."""

    STRINGS = "strings"
    BYTE_ARRAYS = "byte_arrays"


class ConversionPolicy(StrEnum):
    """What the string encoder does when a single entry fails to convert."""

    SKIP = "skip"
    ABORT = "abort"


class ByteDisplay(StrEnum):
    """How the CLI renders raw byte buffers."""

    ESCAPE = "escape"
    HEX = "hex"


class FailureKind(StrEnum):
    """Category of a listing failure."""

    PATH_UNUSABLE = "path_unusable"
    READ_FAILURE = "read_failure"
    ELEMENT_CONVERSION = "element_conversion"
    BOUNDARY_ASSIGNMENT = "boundary_assignment"
    ALLOCATION = "allocation"


@dataclass
class OperationDefinition:
    """Definition of a listing operation exposed to the host.

    Args:
        name: Operation name used for registry lookups.
        description: Human-readable description of what the operation returns.
        encoding: Output shape produced by the operation.
        host_name: Name under which the embedding host binds the operation.
    """

    name: str
    description: str
    encoding: OutputEncoding
    host_name: str = ""


@dataclass
class Config:
    """Runtime configuration for listing operations.

    Args:
        text_encoding: Codec used to turn raw entry names into text.
        conversion_policy: Whether unconvertible entries are skipped or abort
            the whole call.
        byte_display: CLI rendering of byte buffers.
    """

    text_encoding: str = "utf-8"
    conversion_policy: ConversionPolicy = ConversionPolicy.SKIP
    byte_display: ByteDisplay = ByteDisplay.ESCAPE
