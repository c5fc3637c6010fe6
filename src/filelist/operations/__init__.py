"""Operations package: host-facing listing operations and their registry."""

from filelist.operations.dispatcher import OperationDispatcher
from filelist.operations.registry import (
    BRIDGE_VERSION,
    OPERATION_REGISTRY,
    OperationEntry,
    get_operation,
    get_operation_definitions,
    on_load,
    on_unload,
    register_operation,
)

__all__ = [
    "BRIDGE_VERSION",
    "OPERATION_REGISTRY",
    "OperationDispatcher",
    "OperationEntry",
    "get_operation",
    "get_operation_definitions",
    "on_load",
    "on_unload",
    "register_operation",
]
