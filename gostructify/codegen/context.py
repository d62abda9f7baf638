"""Template environment for Go source generation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Final

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"


@dataclass
class GeneratorContext:
    """Context for code generation with cached resources."""

    template_env: Environment = field(init=False)

    def __post_init__(self) -> None:
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            auto_reload=False,  # Disable auto-reload for performance
            enable_async=False,
        )
        # Pre-compile templates
        self._struct_template = self.template_env.get_template("struct.go.j2")
        self._file_template = self.template_env.get_template("file.go.j2")

    @property
    def struct_template(self) -> Template:
        return self._struct_template

    @property
    def file_template(self) -> Template:
        return self._file_template

    def method_template(self, name: str) -> Template:
        return self.template_env.get_template(f"methods/{name}.go.j2")


@lru_cache(maxsize=1)
def default_context() -> GeneratorContext:
    return GeneratorContext()


@lru_cache(maxsize=256)
def quote(value: str) -> str:
    """Quote a string for Go literal embedding. Cached for performance.

    Non-ASCII characters are kept as-is; Go source is UTF-8 and rejects the
    surrogate-pair escapes that ASCII-only JSON would produce.
    """
    return json.dumps(value, ensure_ascii=False)
