"""Entry point: parses CLI arguments, loads config, lists a directory."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from filelist.models import ByteDisplay


def _setup_logging(verbose: bool) -> None:
    """Configure root logger.

    Args:
        verbose: If True, set level to DEBUG; otherwise WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def render_bytes(name: bytes | bytearray, display: ByteDisplay) -> str:
    """Render a raw entry name for the terminal."""
    if display == ByteDisplay.HEX:
        return bytes(name).hex()
    return bytes(name).decode("ascii", errors="backslashreplace")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for filelist.

    Returns:
        Process exit status.
    """
    parser = argparse.ArgumentParser(
        prog="filelist",
        description="List the entries of a directory as text or raw bytes.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to list. Defaults to '.'.",
    )
    parser.add_argument(
        "--bytes",
        "-b",
        action="store_true",
        help="List raw entry-name bytes instead of text.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a TOML config file (overrides default.toml).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    from filelist.config import load_config
    from filelist.operations import OperationDispatcher, on_load, on_unload

    # Entry names are printed verbatim, one per line.
    console = Console(highlight=False, emoji=False, soft_wrap=True)
    config_path = Path(args.config) if args.config else None

    try:
        config = load_config(config_path=config_path)
    except (ValueError, FileNotFoundError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    on_load()
    try:
        dispatcher = OperationDispatcher(config)
        operation = "list_as_byte_arrays" if args.bytes else "list_as_strings"
        result = dispatcher.invoke(operation, args.path)
    finally:
        on_unload()

    if result is None:
        print(f"Error: cannot list directory: {args.path}", file=sys.stderr)
        return 1

    if not result:
        console.print("[dim](empty directory)[/dim]")
        return 0

    for item in result:
        line = item if isinstance(item, str) else render_bytes(item, config.byte_display)
        console.print(line, markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
