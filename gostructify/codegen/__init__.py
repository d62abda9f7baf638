"""Go source generation from resolved tables."""

from .annotations import TAG_BUILDERS, Tag, build_tags, format_tags
from .context import GeneratorContext, default_context
from .emitter import Field, build_fields, emit, emit_file, field_type
from .methods import METHOD_BUILDERS, build_methods
from .options import NULLABLE_MODES, GenerationOptions, filter_options

__all__ = [
    "Field",
    "GenerationOptions",
    "GeneratorContext",
    "METHOD_BUILDERS",
    "NULLABLE_MODES",
    "TAG_BUILDERS",
    "Tag",
    "build_fields",
    "build_methods",
    "build_tags",
    "default_context",
    "emit",
    "emit_file",
    "field_type",
    "filter_options",
    "format_tags",
]
