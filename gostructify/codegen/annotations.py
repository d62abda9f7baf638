"""Struct tag builders for generated fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Iterable, Mapping, Sequence

from ..database.models import Column
from .options import filter_options


@dataclass(frozen=True, slots=True)
class Tag:
    """A single struct tag entry, rendered as ``key:"name,opt1,opt2"``."""

    key: str
    name: str
    options: tuple[str, ...] = ()

    @property
    def value(self) -> str:
        return ",".join((self.name, *self.options))

    def __str__(self) -> str:
        return f'{self.key}:"{self.value}"'


def json_tag(column: Column) -> Tag:
    return Tag("json", column.name.lower(), ("omitempty",))


def xml_tag(column: Column) -> Tag:
    return Tag("xml", column.name.lower(), ("omitempty",))


def csv_tag(column: Column) -> Tag:
    return Tag("csv", column.name.lower(), ("omitempty",))


# TODO: emit gorm type/unique settings, e.g. gorm:"type:varchar(100);unique"
def gorm_tag(column: Column) -> Tag:
    return Tag("gorm", f"column:{column.name}")


def sqlx_tag(column: Column) -> Tag:
    return Tag("db", column.name)


TAG_BUILDERS: Final[Mapping[str, Callable[[Column], Tag]]] = {
    "json": json_tag,
    "xml": xml_tag,
    "csv": csv_tag,
    "gorm": gorm_tag,
    "sqlx": sqlx_tag,
}


def build_tags(column: Column, kinds: Iterable[str], *, strict: bool = False) -> list[Tag]:
    """Build the tags requested for a column, sorted by key.

    A key requested more than once appears once.

    Raises:
        UnrecognizedOption: For an unknown kind when ``strict`` is set.
    """
    tags: dict[str, Tag] = {}
    for kind in filter_options(kinds, TAG_BUILDERS, "tag", strict=strict):
        tag = TAG_BUILDERS[kind](column)
        tags[tag.key] = tag
    return sorted(tags.values(), key=lambda tag: tag.key)


def format_tags(tags: Sequence[Tag]) -> str:
    """Join tags into the body of a struct tag literal."""
    return " ".join(str(tag) for tag in tags)
