"""Method fragments injected after a generated struct."""

from __future__ import annotations

from typing import Callable, Final, Iterable, Mapping

from .context import GeneratorContext, default_context, quote
from .options import filter_options

MethodBuilder = Callable[[GeneratorContext, str, str], str]


def gorm_table_name(ctx: GeneratorContext, struct_name: str, table_name: str) -> str:
    """Render a TableName method so gorm does not pluralize the struct name."""
    rendered = ctx.method_template("gorm_table_name").render(
        receiver=struct_name[:1].lower(),
        struct_name=struct_name,
        table_name_literal=quote(table_name),
    )
    return rendered.rstrip("\n")


METHOD_BUILDERS: Final[Mapping[str, MethodBuilder]] = {
    "gorm": gorm_table_name,
}


def build_methods(
    struct_name: str,
    table_name: str,
    options: Iterable[str],
    *,
    strict: bool = False,
    ctx: GeneratorContext | None = None,
) -> list[str]:
    """Build method fragments in request order.

    Args:
        struct_name: The already transformed Go struct name.
        table_name: The original table name.
        options: Requested method options.
        strict: Raise on unknown options instead of logging a warning.
        ctx: Template context, the shared default when omitted.

    Raises:
        UnrecognizedOption: For an unknown option when ``strict`` is set.
    """
    ctx = ctx or default_context()
    return [
        METHOD_BUILDERS[option](ctx, struct_name, table_name)
        for option in filter_options(options, METHOD_BUILDERS, "method", strict=strict)
    ]
