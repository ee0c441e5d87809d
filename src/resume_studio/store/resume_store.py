"""Single source of truth for the in-memory resume document."""

from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import BaseModel

from resume_studio.config import EditorConfig
from resume_studio.models.resume import (
    EXAMPLE_RESUME,
    SECTION_MODELS,
    ResumeData,
    ResumeModel,
    Section,
    blank_resume,
)
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
from resume_studio.utils.ids import generate_id

logger = logging.getLogger(__name__)

Listener = Callable[[ResumeData], None]


class ResumeStore:
    """Holds one ResumeData and mutates it only through dispatch().

    Every dispatch builds a new document (the previous one is never mutated)
    and notifies all subscribers before returning.
    """

    def __init__(self, initial: ResumeData | None = None):
        self._state = initial if initial is not None else ResumeData()
        self._listeners: list[Listener] = []

    def get_state(self) -> ResumeData:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> None:
        reducer = _REDUCERS.get(type(action))
        if reducer is None:
            raise TypeError(f"Unknown store action: {type(action).__name__}")
        self._state = reducer(self._state, action)
        logger.debug("Dispatched %s", type(action).__name__)
        self._notify()

    def _notify(self) -> None:
        state = self._state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.error("Store listener %r failed", listener, exc_info=True)


def create_store(config: EditorConfig | None = None) -> ResumeStore:
    """Store seeded with the example resume or a blank one, per ``editor.bootstrap``."""
    config = config or EditorConfig()
    if config.bootstrap == "blank":
        return ResumeStore(blank_resume())
    return ResumeStore(EXAMPLE_RESUME.model_copy(deep=True))


# ---------------------------------------------------------------------------
# Reducers
# ---------------------------------------------------------------------------


def _set_resume_data(state: ResumeData, action: SetResumeData) -> ResumeData:
    return action.data.model_copy(deep=True)


def _update_personal_info(state: ResumeData, action: UpdatePersonalInfo) -> ResumeData:
    return state.model_copy(
        update={"personal_info": _apply_patch(state.personal_info, action.patch)}
    )


def _set_summary(state: ResumeData, action: SetSummary) -> ResumeData:
    return state.model_copy(update={"summary": action.text})


def _add_list_item(state: ResumeData, action: AddListItem) -> ResumeData:
    section = Section(action.section)
    model_cls = SECTION_MODELS[section]
    item = action.item
    if isinstance(item, BaseModel):
        data = item.model_dump()
    else:
        data = _to_field_names(model_cls, dict(item or {}))
    if not data.get("id") or data["id"] in state.all_ids():
        data["id"] = generate_id()
    new_item = model_cls.model_validate(data)
    return _replace_section(state, section, [*state.items(section), new_item])


def _update_list_item(state: ResumeData, action: UpdateListItem) -> ResumeData:
    section = Section(action.section)
    items = state.items(section)
    updated = [
        _apply_patch(item, action.patch) if item.id == action.item_id else item
        for item in items
    ]
    return _replace_section(state, section, updated)


def _remove_list_item(state: ResumeData, action: RemoveListItem) -> ResumeData:
    section = Section(action.section)
    remaining = [item for item in state.items(section) if item.id != action.item_id]
    return _replace_section(state, section, remaining)


def _reorder_list_item(state: ResumeData, action: ReorderListItem) -> ResumeData:
    section = Section(action.section)
    items = list(state.items(section))
    index = next((i for i, item in enumerate(items) if item.id == action.item_id), None)
    if index is None:
        return _replace_section(state, section, items)
    item = items.pop(index)
    new_index = min(max(action.new_index, 0), len(items))
    items.insert(new_index, item)
    return _replace_section(state, section, items)


_REDUCERS: dict[type, Callable[[ResumeData, Any], ResumeData]] = {
    SetResumeData: _set_resume_data,
    UpdatePersonalInfo: _update_personal_info,
    SetSummary: _set_summary,
    AddListItem: _add_list_item,
    UpdateListItem: _update_list_item,
    RemoveListItem: _remove_list_item,
    ReorderListItem: _reorder_list_item,
}


def _replace_section(state: ResumeData, section: Section, items: list) -> ResumeData:
    return state.model_copy(update={section.value: items})


def _to_field_names(model_cls: type[ResumeModel], patch: dict[str, Any]) -> dict[str, Any]:
    """Map snake_case or camelCase keys to field names, dropping unknown keys."""
    fields = model_cls.model_fields
    aliases = {info.alias: name for name, info in fields.items() if info.alias}
    result: dict[str, Any] = {}
    for key, value in patch.items():
        name = key if key in fields else aliases.get(key)
        if name is not None:
            result[name] = value
    return result


def _apply_patch(model: ResumeModel, patch: dict[str, Any]) -> ResumeModel:
    update = _to_field_names(type(model), patch)
    update.pop("id", None)  # ids are immutable once assigned
    if not update:
        return model
    return type(model).model_validate({**model.model_dump(), **update})
