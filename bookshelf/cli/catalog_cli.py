"""
Command-line interface for the book catalog.

Usage:
    python -m bookshelf.cli.catalog_cli [--config FILE] [--backend B] [--path P] <command> [options]
"""

import argparse
import asyncio
import sys
from pathlib import Path

from bookshelf.config import CatalogSettings, load_settings
from bookshelf.core.errors import ConfigurationError, DuplicateBookError, OperationCancelledError
from bookshelf.core.models import Book
from bookshelf.core.validators import ValidationError
from bookshelf.observability.logger import log_operation, setup_logger
from bookshelf.observability.metrics import start_metrics_server
from bookshelf.pump import (
    AsyncioDelay,
    CsvFileReader,
    PumpService,
    RepositoryWriter,
    SystemClock,
    create_backoff_policy,
)
from bookshelf.repositories import create_repository
from bookshelf.services import CatalogService


_VISIBLE_CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t"})


def format_book(book: Book) -> str:
    """One tab-separated line per book; line breaks and tabs in text are shown escaped."""
    title = book.title.translate(_VISIBLE_CONTROL_CHARS)
    author = book.author.translate(_VISIBLE_CONTROL_CHARS)
    return f"{book.id}\t{title}\t{author}\t{book.year}"


def build_service(settings: CatalogSettings) -> CatalogService:
    repository = create_repository(settings)
    return CatalogService(repository, repository)


def add_command(args, settings: CatalogSettings) -> int:
    service = build_service(settings)
    book = Book(id=args.id, title=args.title, author=args.author, year=args.year)
    service.register(book)
    print(format_book(book))
    return 0


def list_command(args, settings: CatalogSettings) -> int:
    service = build_service(settings)
    for book in sorted(service.list_all(), key=lambda b: b.id):
        print(format_book(book))
    return 0


def get_command(args, settings: CatalogSettings) -> int:
    service = build_service(settings)
    book = service.find_by_id(args.id)
    if book is None:
        print(f"Book {args.id} not found", file=sys.stderr)
        return 1
    print(format_book(book))
    return 0


def find_command(args, settings: CatalogSettings) -> int:
    service = build_service(settings)
    if args.author:
        books = service.find_by_author(args.author)
    elif args.title:
        books = service.find_by_title(args.title)
    else:
        books = service.find_by_year(args.year)

    for book in books:
        print(format_book(book))
    return 0


def update_title_command(args, settings: CatalogSettings) -> int:
    service = build_service(settings)
    if not service.update_title(args.id, args.title):
        print(f"Book {args.id} not found", file=sys.stderr)
        return 1
    return 0


def remove_command(args, settings: CatalogSettings) -> int:
    service = build_service(settings)
    if not service.remove_book(args.id):
        print(f"Book {args.id} not found", file=sys.stderr)
        return 1
    return 0


def import_command(args, settings: CatalogSettings) -> int:
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Input file not found: {args.input}", file=sys.stderr)
        return 1

    repository = create_repository(settings)
    backoff = create_backoff_policy(
        settings.backoff.kind,
        settings.backoff.base_delay,
        settings.backoff.max_delay,
    )
    pump = PumpService(
        CsvFileReader(input_path),
        RepositoryWriter(repository),
        SystemClock(),
        AsyncioDelay(),
        backoff,
        max_retries=settings.max_retries,
        name="csv_import",
    )

    with log_operation("Importing books", source=str(input_path), backend=settings.backend):
        written = asyncio.run(pump.run())

    print(f"Imported {written} books")
    return 0


COMMANDS = {
    "add": add_command,
    "list": list_command,
    "get": get_command,
    "find": find_command,
    "update-title": update_title_command,
    "remove": remove_command,
    "import": import_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Book catalog over in-memory, CSV or JSON storage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Register a book in a JSON catalog
  python -m bookshelf.cli.catalog_cli --backend json --path data/books.json \\
      add --id 1 --title "Clean Code" --author "Robert C. Martin" --year 2008

  # Import a CSV export with retries configured in YAML
  python -m bookshelf.cli.catalog_cli --config config/catalog.yaml import --input books.csv
        """
    )
    parser.add_argument("--config", help="Path to YAML settings file")
    parser.add_argument("--env-file", help="Path to .env file with BOOKSHELF_* variables")
    parser.add_argument("--backend", choices=["memory", "csv", "json"], help="Override storage backend")
    parser.add_argument("--path", help="Override storage file path")
    parser.add_argument("--metrics-port", type=int, help="Expose Prometheus metrics on this port while running")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_parser = subparsers.add_parser("add", help="Register a new book")
    add_parser.add_argument("--id", type=int, required=True)
    add_parser.add_argument("--title", required=True)
    add_parser.add_argument("--author", required=True)
    add_parser.add_argument("--year", type=int, required=True)

    subparsers.add_parser("list", help="List all books ordered by id")

    get_parser = subparsers.add_parser("get", help="Show a book by id")
    get_parser.add_argument("--id", type=int, required=True)

    find_parser = subparsers.add_parser("find", help="Search books")
    group = find_parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--author", help="Case-insensitive author substring")
    group.add_argument("--title", help="Case-insensitive title substring")
    group.add_argument("--year", type=int, help="Exact publication year")

    update_parser = subparsers.add_parser("update-title", help="Rename a book")
    update_parser.add_argument("--id", type=int, required=True)
    update_parser.add_argument("--title", required=True)

    remove_parser = subparsers.add_parser("remove", help="Remove a book by id")
    remove_parser.add_argument("--id", type=int, required=True)

    import_parser = subparsers.add_parser("import", help="Pump books from a CSV file into the catalog")
    import_parser.add_argument("--input", required=True, help="CSV file to import")

    return parser


def resolve_settings(args) -> CatalogSettings:
    settings = load_settings(args.config, args.env_file)

    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.path:
        overrides["path"] = args.path
    if overrides:
        settings = settings.model_copy(update=overrides)

    return settings


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = resolve_settings(args)
    except (FileNotFoundError, ConfigurationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger = setup_logger("bookshelf", settings.log_level, settings.log_format)

    if args.metrics_port:
        start_metrics_server(args.metrics_port)
        logger.info("Metrics server started", extra={"port": args.metrics_port})

    try:
        return COMMANDS[args.command](args, settings)
    except (ValidationError, DuplicateBookError) as e:
        print(f"Rejected: {e}", file=sys.stderr)
        return 1
    except OperationCancelledError:
        print("Cancelled", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Command '{args.command}' failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
