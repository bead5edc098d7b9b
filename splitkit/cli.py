"""CLI entry point for splitkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from splitkit.chunking.domain.exceptions import ChunkingDomainError
from splitkit.chunking.plugin_loader import load_splitter_plugins
from splitkit.chunking.service import ChunkingService
from splitkit.chunking.unified.registry import create_default_registry
from splitkit.config import ChunkingSettings
from splitkit.version import get_version

logger = logging.getLogger(__name__)

CHUNK_RULE = "-" * 40
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser(settings: ChunkingSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="splitkit", description="Split text into chunks for embedding")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL.upper(),
        help="Logging level (or SPLITKIT_LOG_LEVEL).",
    )
    parser.add_argument(
        "--no-plugins",
        action="store_true",
        help="Do not load text splitter plugins from entry points.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    split = subparsers.add_parser("split", help="Split a text file (or stdin) into chunks")
    split.add_argument("path", nargs="?", default="-", help="File to split, '-' for stdin (default).")
    split.add_argument(
        "--strategy",
        "-s",
        default=settings.CHUNKING_STRATEGY,
        help="Strategy alias (or SPLITKIT_CHUNKING_STRATEGY). Unknown aliases use the default strategy.",
    )
    split.add_argument(
        "--chunk-size",
        "-cs",
        type=int,
        default=settings.CHUNK_SIZE,
        help="Maximum chunk size in characters (or SPLITKIT_CHUNK_SIZE).",
    )
    split.add_argument(
        "--chunk-overlap",
        "-co",
        type=int,
        default=settings.CHUNK_OVERLAP,
        help="Overlap between chunks in characters (or SPLITKIT_CHUNK_OVERLAP).",
    )
    split.add_argument("--json", action="store_true", help="Print chunks as a JSON array.")

    subparsers.add_parser("strategies", help="List registered strategies")

    return parser


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _print_chunks(chunks: list[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(chunks, ensure_ascii=False, indent=2))
        return
    for index, chunk in enumerate(chunks):
        if index:
            print(CHUNK_RULE)
        print(chunk)


def main(argv: list[str] | None = None) -> int:
    settings = ChunkingSettings()
    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    registry = create_default_registry()
    load_splitter_plugins(registry, enabled=settings.ENABLE_PLUGINS and not args.no_plugins)
    service = ChunkingService(registry=registry, settings=settings)

    if args.command == "strategies":
        for name in registry.names():
            marker = " (default)" if name == registry.default_name else ""
            print(f"{name}{marker}")
        return 0

    try:
        text = _read_text(args.path)
        chunks = service.chunk_text(text, args.chunk_size, args.chunk_overlap, args.strategy)
    except OSError as exc:
        logger.error("Failed to read %s: %s", args.path, exc)
        return 1
    except ChunkingDomainError as exc:
        logger.error("Chunking failed: %s", exc.message)
        return 1

    _print_chunks(chunks, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
