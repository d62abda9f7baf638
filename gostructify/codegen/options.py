"""Generation options shared by the emitter, tag and method builders."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Container, Final, Iterable, Mapping

from ..shared.errors import ConfigError, UnrecognizedOption

logger = logging.getLogger(__name__)

# Nullable mode -> TypeDefinition attribute used for nullable columns
NULLABLE_MODES: Final[Mapping[str, str]] = {
    "guregu": "guregu_type",
    "sql": "sql_type",
}


@dataclass(frozen=True, slots=True)
class GenerationOptions:
    """Caller preferences for one generation pass.

    Attributes:
        nullable_mode: ``"guregu"``, ``"sql"`` or None for plain types only.
        tags: Ordered struct tag kinds, e.g. ``("json", "gorm")``.
        methods: Ordered method options, e.g. ``("gorm",)``.
        strict: Raise on unknown tag kinds and method options instead of
            logging a warning.
    """

    nullable_mode: str | None = None
    tags: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()
    strict: bool = False

    def __post_init__(self) -> None:
        if self.nullable_mode is not None and self.nullable_mode not in NULLABLE_MODES:
            raise ConfigError(
                f"Unknown nullable type '{self.nullable_mode}', "
                f"expected one of {', '.join(NULLABLE_MODES)}"
            )
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "methods", tuple(self.methods))


def filter_options(
    requested: Iterable[str],
    known: Container[str],
    kind: str,
    *,
    strict: bool = False,
) -> tuple[str, ...]:
    """Keep the recognized options, in request order.

    Raises:
        UnrecognizedOption: For the first unknown option when ``strict`` is set.
    """
    accepted: list[str] = []
    for option in requested:
        if option in known:
            accepted.append(option)
            continue
        if strict:
            raise UnrecognizedOption(kind, option)
        logger.warning("Unrecognized %s option: %s", kind, option)
    return tuple(accepted)
