"""Exceptions raised inside the listing core.

Operations catch :class:`ListingError` at the host boundary and report it as
a ``None`` result. :class:`RegistrationError` is the exception to that rule:
it escapes ``on_load`` because a host without its operations cannot run.
"""

from __future__ import annotations

from filelist.models import FailureKind


class ListingError(Exception):
    """Base class for failures of a single listing call."""

    kind: FailureKind


class PathUnusableError(ListingError):
    """The path is empty, not representable, or the directory cannot be opened."""

    kind = FailureKind.PATH_UNUSABLE


class ReadFailureError(ListingError):
    """Enumeration failed after the directory was opened."""

    kind = FailureKind.READ_FAILURE


class ElementConversionError(ListingError):
    """A single entry name could not be converted to text."""

    kind = FailureKind.ELEMENT_CONVERSION


class BoundaryAssignmentError(ListingError):
    """A converted element could not be placed into the destination container."""

    kind = FailureKind.BOUNDARY_ASSIGNMENT


class AllocationFailureError(ListingError):
    """The destination container could not be created."""

    kind = FailureKind.ALLOCATION


class RegistrationError(Exception):
    """An operation could not be registered with the host."""
