"""
Code Emitter - Renders Go struct definitions from resolved tables.

Emission is a pure function of the Table and GenerationOptions: no network
or file I/O happens here, and the same inputs always produce the same bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..database.models import Column, Table
from ..shared.naming import to_pascal_case
from .annotations import TAG_BUILDERS, build_tags, format_tags
from .context import GeneratorContext, default_context
from .methods import build_methods
from .options import NULLABLE_MODES, GenerationOptions, filter_options


@dataclass(frozen=True, slots=True)
class Field:
    """A rendered struct field."""

    name: str
    go_type: str
    tags: str = ""

    @property
    def declaration(self) -> str:
        if self.tags:
            return f"{self.name} {self.go_type} `{self.tags}`"
        return f"{self.name} {self.go_type}"


def field_type(column: Column, nullable_mode: str | None) -> str:
    """Select the Go type for a column.

    Non-nullable columns, and every column when no nullable mode is set, use
    the plain type; nullable columns use the wrapper of the requested mode.
    """
    if not column.nullable or nullable_mode is None:
        return column.definition.plain_type
    return getattr(column.definition, NULLABLE_MODES[nullable_mode])


def build_fields(
    table: Table,
    nullable_mode: str | None,
    tag_kinds: Sequence[str] = (),
) -> list[Field]:
    """Build one Field per column, in column order."""
    return [
        Field(
            name=to_pascal_case(column.name),
            go_type=field_type(column, nullable_mode),
            tags=format_tags(build_tags(column, tag_kinds)) if tag_kinds else "",
        )
        for column in table.columns
    ]


def emit(
    table: Table,
    options: GenerationOptions | None = None,
    ctx: GeneratorContext | None = None,
) -> bytes:
    """Render the struct definition and methods for one table.

    Args:
        table: The resolved table.
        options: Nullable mode, tag kinds and method options.
        ctx: Template context, the shared default when omitted.

    Returns:
        UTF-8 encoded, unformatted Go source.

    Raises:
        UnrecognizedOption: For unknown tags or methods in strict mode.
    """
    options = options or GenerationOptions()
    ctx = ctx or default_context()

    struct_name = to_pascal_case(table.name)
    # Filtered once per table so each unknown kind warns once
    tag_kinds = filter_options(options.tags, TAG_BUILDERS, "tag", strict=options.strict)
    fields = build_fields(table, options.nullable_mode, tag_kinds)
    methods = build_methods(
        struct_name,
        table.name,
        options.methods,
        strict=options.strict,
        ctx=ctx,
    )

    rendered = ctx.struct_template.render(
        struct_name=struct_name,
        source=f"{table.database}.{table.name}" if table.database else table.name,
        fields=fields,
        methods=methods,
    )
    return rendered.encode("utf-8")


def emit_file(
    package: str,
    tables: Sequence[Table],
    options: GenerationOptions | None = None,
    command: str | None = None,
    ctx: GeneratorContext | None = None,
) -> bytes:
    """Render a complete Go source file holding one struct per table.

    Args:
        package: Go package name for the ``package`` clause.
        tables: Tables to render, in output order.
        options: Generation options applied to every table.
        command: The generating command line, recorded in the header.
        ctx: Template context, the shared default when omitted.
    """
    ctx = ctx or default_context()
    bodies = [emit(table, options, ctx).decode("utf-8").rstrip("\n") for table in tables]
    rendered = ctx.file_template.render(package=package, command=command, bodies=bodies)
    return rendered.encode("utf-8")
