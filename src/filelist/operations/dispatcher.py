"""Operation dispatcher: invokes registered operations on behalf of the host."""

from __future__ import annotations

import logging
from typing import Any

from filelist.models import Config
from filelist.operations.registry import get_operation

logger = logging.getLogger(__name__)


class OperationDispatcher:
    """Resolves operations by name and calls them with a shared config.

    Args:
        config: Runtime configuration passed to every operation.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()

    def invoke(self, name: str, path: str | None) -> list[Any] | None:
        """Run a registered operation against *path*.

        Args:
            name: Operation name or host name.
            path: Directory to list.

        Returns:
            The operation's result, or None if the listing failed.

        Raises:
            LookupError: If no operation is registered under *name*; the
                host must call ``on_load()`` first.
        """
        entry = get_operation(name)
        if entry is None:
            logger.warning("Unknown operation requested: %s", name)
            raise LookupError(f"unknown operation {name!r}; was on_load() called?")

        logger.debug("invoke: %s(%r)", entry.definition.name, path)
        return entry.fn(path, self.config)
