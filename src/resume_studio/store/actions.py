"""The closed set of store actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from resume_studio.models.resume import ResumeData, Section


@dataclass(frozen=True)
class SetResumeData:
    """Replace the whole document."""

    data: ResumeData


@dataclass(frozen=True)
class UpdatePersonalInfo:
    patch: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SetSummary:
    text: str


@dataclass(frozen=True)
class AddListItem:
    """Append an item; it gets a fresh id when it has none."""

    section: Section
    item: Any = None


@dataclass(frozen=True)
class UpdateListItem:
    section: Section
    item_id: str
    patch: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RemoveListItem:
    section: Section
    item_id: str


@dataclass(frozen=True)
class ReorderListItem:
    section: Section
    item_id: str
    new_index: int


Action = (
    SetResumeData
    | UpdatePersonalInfo
    | SetSummary
    | AddListItem
    | UpdateListItem
    | RemoveListItem
    | ReorderListItem
)
