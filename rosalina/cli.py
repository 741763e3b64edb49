"""
Command-line interface for code-behind generation.

Usage:
    rosalina-generate Assets/UI/MainMenu.uxml
    rosalina-generate Assets/UI --dry-run
    rosalina-generate Assets/UI/MainMenu.uxml --stdout
"""

import argparse
import os
import sys
from typing import List, Optional

from .generator import CodeBehindGenerator, find_documents, is_ui_document
from .utils.config import RosalinaConfig, load_config, get_config, set_config
from .utils.exceptions import ConfigurationError
from .utils.logging import RosalinaLogger, setup_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rosalina-generate",
        description="Generate C# code-behind files for Unity UI documents",
    )
    parser.add_argument(
        "paths", nargs="+", help="UI document files or directories to search"
    )
    parser.add_argument("--config", type=str, default=None, help="JSON or YAML configuration file")
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument(
        "--dry-run", action="store_true", default=False, help="render without writing files"
    )
    parser.add_argument(
        "--stdout", action="store_true", default=False, help="print generated code instead of writing it"
    )
    return parser


def collect_documents(paths: List[str], extension: str, status: RosalinaLogger) -> List[str]:
    """Expand directories and drop paths that are missing or not UI documents."""
    documents: List[str] = []
    for path in paths:
        if not os.path.exists(path):
            status.log_skipped(path, "no such file or directory")
            continue
        for candidate in find_documents(path, extension):
            if is_ui_document(candidate, extension):
                documents.append(candidate)
            else:
                status.log_skipped(candidate, f"not a {extension} document")
    return documents


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rosalina-generate command."""
    args = build_argument_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_config()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    set_config(config)
    configure_logging(config, args.log_level)

    status = RosalinaLogger("cli")
    documents = collect_documents(args.paths, config.generator.document_extension, status)
    if not documents:
        print("error: no UI documents found", file=sys.stderr)
        return EXIT_USAGE

    generator = CodeBehindGenerator(banner=config.banner())
    report = generator.generate_all(documents, dry_run=args.dry_run or args.stdout)

    if args.stdout:
        for rendered in report.generated:
            sys.stdout.write(rendered.text)

    for document_path, message in report.failures:
        print(f"{document_path}: {message}", file=sys.stderr)

    return EXIT_OK if report.succeeded else EXIT_FAILURE


def configure_logging(config: RosalinaConfig, level: Optional[str] = None) -> None:
    """Apply logging settings; ``level`` overrides the configured one."""
    log_file = config.logging.log_file if config.logging.enable_file_logging else None
    setup_logging(level=level or config.logging.level, log_file=log_file)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
