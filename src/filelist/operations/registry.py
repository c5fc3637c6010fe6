"""Operation registry: binds operation names to implementations for the host."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from filelist.errors import RegistrationError
from filelist.models import OperationDefinition
from filelist.operations.list_as_byte_arrays import DEFINITION as _BYTES_DEFINITION
from filelist.operations.list_as_byte_arrays import list_as_byte_arrays
from filelist.operations.list_as_strings import DEFINITION as _STRINGS_DEFINITION
from filelist.operations.list_as_strings import list_as_strings

logger = logging.getLogger(__name__)

# Type alias for a listing operation: (path, config=None) -> result or None.
OperationFn = Callable[..., list[Any] | None]

# Interface version reported to the host by on_load().
BRIDGE_VERSION = 1


class OperationEntry:
    """Combines an operation's definition with its implementation.

    Args:
        definition: The :class:`~filelist.models.OperationDefinition` seen by the host.
        fn: Callable that performs the listing.
    """

    def __init__(self, definition: OperationDefinition, fn: OperationFn) -> None:
        self.definition = definition
        self.fn = fn


# Registry maps operation name → OperationEntry.
# Populated by on_load().
OPERATION_REGISTRY: dict[str, OperationEntry] = {}

_BUILTIN_OPERATIONS: tuple[tuple[OperationDefinition, OperationFn], ...] = (
    (_STRINGS_DEFINITION, list_as_strings),
    (_BYTES_DEFINITION, list_as_byte_arrays),
)


def register_operation(definition: OperationDefinition, fn: OperationFn) -> None:
    """Register an operation in the global registry.

    Registering the same implementation twice under one name is a no-op.

    Args:
        definition: Operation definition.
        fn: Function implementing the operation.

    Raises:
        RegistrationError: If the definition has no name, *fn* is not
            callable, or the name is already bound to another implementation.
    """
    if not definition.name:
        raise RegistrationError("operation definition has no name")
    if not callable(fn):
        raise RegistrationError(f"operation {definition.name!r} is not callable")

    existing = OPERATION_REGISTRY.get(definition.name)
    if existing is not None and existing.fn is not fn:
        raise RegistrationError(
            f"operation {definition.name!r} is already bound to another implementation"
        )
    OPERATION_REGISTRY[definition.name] = OperationEntry(definition=definition, fn=fn)


def get_operation(name: str) -> OperationEntry | None:
    """Look up a registered operation by its name or its host name.

    Returns:
        The matching :class:`OperationEntry`, or None.
    """
    entry = OPERATION_REGISTRY.get(name)
    if entry is not None:
        return entry
    for candidate in OPERATION_REGISTRY.values():
        if candidate.definition.host_name and candidate.definition.host_name == name:
            return candidate
    return None


def get_operation_definitions() -> list[OperationDefinition]:
    """Return all registered operation definitions."""
    return [entry.definition for entry in OPERATION_REGISTRY.values()]


def on_load() -> int:
    """Register the built-in operations. Must run before the host calls them.

    Returns:
        :data:`BRIDGE_VERSION`.

    Raises:
        RegistrationError: If any operation cannot be registered.
    """
    for definition, fn in _BUILTIN_OPERATIONS:
        register_operation(definition, fn)
    logger.debug("on_load: %d operations registered", len(OPERATION_REGISTRY))
    return BRIDGE_VERSION


def on_unload() -> None:
    """Teardown hook. There is no process-wide state to release."""
    logger.debug("on_unload")
