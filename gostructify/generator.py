"""
Generation pipeline - resolves tables and renders one Go source file per database.

Each (database, table) pair is an independent resolve with its own provider
call, and therefore its own connection. Resolves can run in a thread pool; a
failing table is reported in its result without affecting the others unless
the caller asks to stop at the first failure.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from .codegen import GenerationOptions, emit_file
from .database import SchemaProvider, Table
from .shared.errors import GenerationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of resolving one table."""

    database: str
    table_name: str
    table: Table | None = None
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class DatabaseResult:
    """Outcome of generating one database.

    ``source`` holds every successfully resolved table, in request order, and
    is None when no table could be resolved.
    """

    database: str
    results: tuple[GenerationResult, ...]
    source: bytes | None = None

    @property
    def failures(self) -> list[GenerationResult]:
        return [result for result in self.results if not result.ok]


def generate_table(provider: SchemaProvider, database: str, table_name: str) -> GenerationResult:
    """Resolve one table.

    Per-table failures are returned in the result; any other exception
    propagates.
    """
    try:
        table = provider.resolve(database, table_name)
    except GenerationError as e:
        logger.debug("Generation failed for %s.%s: %s", database, table_name, e)
        return GenerationResult(database, table_name, error=e)
    return GenerationResult(database, table_name, table=table)


def generate_tables(
    provider: SchemaProvider,
    database: str,
    table_names: Sequence[str],
    *,
    workers: int | None = None,
    fail_fast: bool = False,
) -> list[GenerationResult]:
    """Resolve every table of a database.

    Args:
        provider: Schema provider for the active dialect.
        database: Database name.
        table_names: Tables to resolve.
        workers: Run up to this many tables at once when greater than one.
        fail_fast: Stop at the first failed table. Tables after it are not
            resolved, and queued ones are cancelled when running in a pool.

    Returns:
        One result per resolved table, in the order the tables were given.
        With ``fail_fast`` the list ends at the first failure.
    """
    results: list[GenerationResult] = []

    if workers and workers > 1 and len(table_names) > 1:
        # Use thread pool for the I/O-bound schema queries
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(generate_table, provider, database, table_name)
                for table_name in table_names
            ]
            for index, future in enumerate(futures):
                result = future.result()
                results.append(result)
                if fail_fast and not result.ok:
                    for pending in futures[index + 1:]:
                        pending.cancel()
                    break
        return results

    for table_name in table_names:
        result = generate_table(provider, database, table_name)
        results.append(result)
        if fail_fast and not result.ok:
            break
    return results


def generate_database(
    provider: SchemaProvider,
    database: str,
    table_names: Sequence[str],
    options: GenerationOptions,
    *,
    package: str,
    command: str | None = None,
    workers: int | None = None,
    fail_fast: bool = False,
) -> DatabaseResult:
    """Resolve the tables of a database and render them into one Go file.

    Args:
        provider: Schema provider for the active dialect.
        database: Database name.
        table_names: Tables to generate.
        options: Generation options.
        package: Go package name written into the file.
        command: Generating command line recorded in the file header.
        workers: Run up to this many tables at once when greater than one.
        fail_fast: Stop resolving at the first failed table.

    Raises:
        UnrecognizedOption: For unknown tags or methods in strict mode.
    """
    results = tuple(
        generate_tables(provider, database, table_names, workers=workers, fail_fast=fail_fast)
    )
    tables = [result.table for result in results if result.table is not None]
    source = emit_file(package, tables, options, command=command) if tables else None
    return DatabaseResult(database, results, source)
