"""Turn raw provider JSON into a well-formed ResumeData."""

from __future__ import annotations

import logging
from typing import Any

from resume_studio.models.resume import (
    SECTION_MODELS,
    PersonalInfo,
    ResumeData,
    ResumeModel,
    Section,
)
from resume_studio.store.actions import SetResumeData
from resume_studio.store.resume_store import ResumeStore
from resume_studio.utils.ids import generate_id

logger = logging.getLogger(__name__)

_BULLET_FIELDS = {"description"}


def normalize(raw: Any) -> ResumeData:
    """Coerce a provider response into ResumeData. Never raises.

    Missing or non-list collections become empty lists, every list item gets
    a freshly generated id (ids in the input are ignored), and missing text
    fields become empty strings. Source order is preserved.
    """
    if not isinstance(raw, dict):
        logger.warning("Provider response is %s, not an object", type(raw).__name__)
        raw = {}

    sections = {
        section.value: _coerce_items(section, raw.get(section.value)) for section in Section
    }
    return ResumeData(
        personal_info=_coerce_model(PersonalInfo, _lookup(raw, "personalInfo", "personal_info")),
        summary=_coerce_str(raw.get("summary")),
        **sections,
    )


def ingest(raw: Any, store: ResumeStore) -> ResumeData:
    """Normalize a provider response and replace the store's document with it."""
    data = normalize(raw)
    store.dispatch(SetResumeData(data))
    logger.info(
        "Imported resume for %r: %s",
        data.personal_info.full_name,
        ", ".join(f"{len(data.items(s))} {s.value}" for s in Section),
    )
    return data


def _lookup(raw: dict, *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _coerce_items(section: Section, value: Any) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Dropping %s: expected a list, got %s", section.value, type(value).__name__)
        return []
    model_cls = SECTION_MODELS[section]
    items = []
    for element in value:
        if section is Section.SKILLS and isinstance(element, str):
            element = {"name": element}
        if not isinstance(element, dict):
            continue
        items.append(_coerce_model(model_cls, element, with_id=True))
    return items


def _coerce_model(model_cls: type[ResumeModel], value: Any, with_id: bool = False) -> ResumeModel:
    source = value if isinstance(value, dict) else {}
    data: dict[str, Any] = {}
    for name, info in model_cls.model_fields.items():
        if name == "id":
            continue
        field_value = _lookup(source, info.alias or name, name)
        if name in _BULLET_FIELDS:
            data[name] = _coerce_bullets(field_value)
        else:
            data[name] = _coerce_str(field_value)
    if with_id:
        data["id"] = generate_id()
    return model_cls(**data)


def _coerce_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _coerce_bullets(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, list):
        return []
    return [
        _coerce_str(v)
        for v in value
        if isinstance(v, (str, int, float)) and not isinstance(v, bool)
    ]
