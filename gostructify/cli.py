"""
Command line interface for gostructify.

Usage:
    gostructify [global options] <dialect> [dialect options]
    python -m gostructify [global options] <dialect> [dialect options]

Dialects:
    mariadb     generate structs from a mariadb database
    mysql       generate structs from a mysql database
    postgresql  generate structs from a postgresql database
    vertica     generate structs from a vertica database

Examples:
    gostructify --directory ./models --tags gorm,sqlx,json --methods gorm \\
        mariadb --hostname 127.0.0.1 --username root --database test --tables all_data_types
    gostructify --nullable-type sql --dry-run postgresql --database app --tables users,admins
"""

from __future__ import annotations

import argparse
import getpass
import logging
import shlex
import sys
from pathlib import Path
from typing import Any, Final, Mapping, Sequence

from . import __version__
from .codegen import NULLABLE_MODES, GenerationOptions
from .database import create_provider
from .discovery import find_package
from .formatting import format_source
from .generator import generate_database
from .shared import (
    ConfigError,
    StructifyError,
    load_config,
    password_from_env,
    split_list,
)

logger = logging.getLogger(__name__)

# Connection settings each dialect accepts, besides the password
CONNECTION_KEYS: Final[Mapping[str, tuple[str, ...]]] = {
    "mariadb": ("hostname", "port", "username"),
    "mysql": ("hostname", "port", "username"),
    "postgresql": ("hostname", "port", "username", "sslmode", "schema"),
    "vertica": ("dsn", "schema"),
}
PASSWORD_DIALECTS: Final[frozenset[str]] = frozenset({"mariadb", "mysql", "postgresql"})


def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--database", help="comma separated database names `application_db`")
    parser.add_argument("--tables", help="comma separated table names `users,admins`")


def _add_host_arguments(parser: argparse.ArgumentParser, default_port: int) -> None:
    parser.add_argument("--hostname", help="hostname to connect to `examplehost.com`")
    parser.add_argument("--port", type=int, help=f"database port to connect to (default {default_port})")
    parser.add_argument("--username", help="username credentials to use `myuser`")
    parser.add_argument("--password", help="password for the database connection")
    parser.add_argument("--stdin", action="store_true", help="prompt for the password")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gostructify",
        description="Generate go structs, types, and methods from database tables",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="YAML file providing defaults for any option")
    parser.add_argument("--directory", type=Path, help="directory of the target Go package")
    parser.add_argument("--file", help="comma separated Go files of the target package")
    parser.add_argument("--output", type=Path, help="output file (single database only)")
    parser.add_argument(
        "--nullable-type",
        dest="nullable_type",
        choices=sorted(NULLABLE_MODES),
        help="preferred handling of nullable types",
    )
    parser.add_argument("--tags", help="comma separated tag options `json,gorm,sqlx,xml,csv`")
    parser.add_argument("--methods", help="comma separated method options `gorm`")
    parser.add_argument("--dry-run", action="store_true", help="print output instead of writing files")
    parser.add_argument("--no-format", action="store_true", help="skip goimports/gofmt")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail on unrecognized tag or method options",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="continue with the remaining tables when one fails",
    )
    parser.add_argument("--workers", type=int, default=None, help="tables to resolve in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    subparsers = parser.add_subparsers(dest="dialect", metavar="dialect", required=True)

    for name in ("mariadb", "mysql"):
        sub = subparsers.add_parser(name, help=f"generate structs from a {name} database")
        _add_host_arguments(sub, default_port=3306)
        _add_target_arguments(sub)

    postgres = subparsers.add_parser("postgresql", help="generate structs from a postgresql database")
    _add_host_arguments(postgres, default_port=5432)
    postgres.add_argument("--sslmode", help="libpq sslmode (default disable)")
    postgres.add_argument("--schema", help="schema to read columns from (default: the database name)")
    _add_target_arguments(postgres)

    vertica = subparsers.add_parser("vertica", help="generate structs from a vertica database")
    vertica.add_argument("--dsn", help="ODBC data source name `vertica`")
    vertica.add_argument("--schema", help="schema to read columns from (default: the database name)")
    _add_target_arguments(vertica)

    return parser


def _pick(cli_value: Any, config_value: Any) -> Any:
    """Command line values win over config file values."""
    return cli_value if cli_value is not None else config_value


def resolve_password(args: argparse.Namespace, username: str | None) -> str:
    """Return the password from the flag, the environment, or a prompt.

    Raises:
        ConfigError: If no password source is available.
    """
    if args.password is not None:
        return args.password
    env_password = password_from_env()
    if env_password is not None:
        return env_password
    if args.stdin:
        return getpass.getpass(f"Enter password for user {username or ''} (if no password, leave blank): ")
    raise ConfigError(
        "Missing password. Set GOSTRUCTIFY_PASSWORD, pass --password, "
        "or use --stdin to be prompted"
    )


def connection_settings(args: argparse.Namespace, config: Mapping[str, Any]) -> dict[str, Any]:
    """Merge dialect connection settings from the config file and flags."""
    configured = config.get("connection", {})
    settings: dict[str, Any] = {}
    for key in CONNECTION_KEYS[args.dialect]:
        value = _pick(getattr(args, key, None), configured.get(key))
        if value is not None:
            settings[key] = value
    if args.dialect in PASSWORD_DIALECTS:
        settings["password"] = resolve_password(args, settings.get("username"))
    return settings


def package_inputs(args: argparse.Namespace, config: Mapping[str, Any]) -> list[Path]:
    """Return the paths used for Go package discovery."""
    directory = _pick(args.directory, config.get("directory"))
    if directory is not None:
        return [Path(directory)]
    files = split_list(_pick(args.file, config.get("file")))
    if files:
        return [Path(f) for f in files]
    return [Path(".")]


def command_line(argv: Sequence[str]) -> str:
    """Render the invoking command for the file header, hiding the password."""
    redacted: list[str] = []
    hide_next = False
    for arg in argv:
        if hide_next:
            redacted.append("***")
            hide_next = False
        elif arg == "--password":
            redacted.append(arg)
            hide_next = True
        elif arg.startswith("--password="):
            redacted.append("--password=***")
        else:
            redacted.append(arg)
    return shlex.join(["gostructify", *redacted])


def output_path(directory: Path, database: str) -> Path:
    """Default output file for a database."""
    return directory / f"{database}_structify.go".lower()


def run(args: argparse.Namespace, argv: Sequence[str]) -> int:
    """Run a generation pass and return the number of failed tables."""
    config = load_config(args.config) if args.config else {}

    options = GenerationOptions(
        nullable_mode=_pick(args.nullable_type, config.get("nullable_type")),
        tags=split_list(_pick(args.tags, config.get("tags"))),
        methods=split_list(_pick(args.methods, config.get("methods"))),
        strict=bool(_pick(args.strict, config.get("strict"))),
    )

    databases = split_list(_pick(args.database, config.get("databases")))
    tables = split_list(_pick(args.tables, config.get("tables")))
    if not databases:
        raise ConfigError("At least one database is required (--database)")
    if not tables:
        raise ConfigError("At least one table is required (--tables)")

    explicit_output = _pick(args.output, config.get("output"))
    if explicit_output is not None and len(databases) > 1:
        raise ConfigError("--output can only be used with a single database")

    package = find_package(package_inputs(args, config))
    provider = create_provider(args.dialect, **connection_settings(args, config))
    workers = _pick(args.workers, config.get("workers"))
    command = command_line(argv)

    failures = 0
    for database in databases:
        result = generate_database(
            provider,
            database,
            tables,
            options,
            package=package.name,
            command=command,
            workers=workers,
            fail_fast=not args.keep_going,
        )
        for failure in result.failures:
            if not args.keep_going:
                raise failure.error
            logger.error(
                "Failed to generate struct for %s.%s: %s",
                failure.database,
                failure.table_name,
                failure.error,
            )
            failures += 1

        src = result.source
        if src is None:
            continue
        if args.dry_run:
            if not args.no_format:
                src = format_source(src)
            print(src.decode("utf-8"))
            continue

        output = Path(explicit_output) if explicit_output else output_path(package.directory, database)
        # Unformatted source stays on disk if the formatter fails
        output.write_bytes(src)
        if not args.no_format:
            output.write_bytes(format_source(src))
        print(f"Wrote file: {output}")

    return failures


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        failures = run(args, argv)
    except (StructifyError, FileNotFoundError, ValueError) as e:
        raise SystemExit(f"Error: {e}") from e

    if failures:
        raise SystemExit(f"Error: {failures} table(s) failed to generate")


if __name__ == "__main__":
    main()
