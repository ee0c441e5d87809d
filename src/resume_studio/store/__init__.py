"""Resume store and its action set."""

from resume_studio.store.actions import (
    Action,
    AddListItem,
    ReorderListItem,
    RemoveListItem,
    SetResumeData,
    SetSummary,
    UpdateListItem,
    UpdatePersonalInfo,
)
from resume_studio.store.resume_store import ResumeStore, create_store

__all__ = [
    "Action",
    "AddListItem",
    "ReorderListItem",
    "RemoveListItem",
    "ResumeStore",
    "create_store",
    "SetResumeData",
    "SetSummary",
    "UpdateListItem",
    "UpdatePersonalInfo",
]
