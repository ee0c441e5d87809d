"""Tests for ResumeStore dispatch and notification."""

from __future__ import annotations

import pytest

from resume_studio.config import EditorConfig
from resume_studio.models.resume import EXAMPLE_RESUME, Experience, ResumeData, Section, Skill
from resume_studio.store.actions import (
    AddListItem,
    RemoveListItem,
    ReorderListItem,
    SetResumeData,
    SetSummary,
    UpdateListItem,
    UpdatePersonalInfo,
)
from resume_studio.store.resume_store import ResumeStore, create_store


class TestInitialState:
    def test_default_is_blank(self):
        store = ResumeStore()
        assert store.get_state() == ResumeData()

    def test_initial_document_kept(self, example_store):
        assert example_store.get_state().personal_info.full_name == "Alex Doe"


class TestSubscribe:
    def test_listener_notified_synchronously(self, example_store):
        seen = []
        example_store.subscribe(seen.append)
        example_store.dispatch(SetSummary("New summary"))
        assert len(seen) == 1
        assert seen[0].summary == "New summary"

    def test_unsubscribe_stops_notifications(self, example_store):
        seen = []
        unsubscribe = example_store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        example_store.dispatch(SetSummary("x"))
        assert seen == []

    def test_failing_listener_does_not_block_others(self, example_store):
        seen = []

        def broken(_state):
            raise RuntimeError("boom")

        example_store.subscribe(broken)
        example_store.subscribe(seen.append)
        example_store.dispatch(SetSummary("x"))
        assert len(seen) == 1

    def test_unknown_action_rejected(self, example_store):
        with pytest.raises(TypeError, match="Unknown store action"):
            example_store.dispatch(object())


class TestSetResumeData:
    def test_full_replace(self, example_store):
        replacement = ResumeData(skills=[Skill(id="s1", name="SQL")])
        example_store.dispatch(SetResumeData(replacement))
        state = example_store.get_state()
        assert state == replacement
        assert state.experience == []
        assert state.personal_info.full_name == ""

    def test_replacement_is_copied(self, example_store):
        replacement = ResumeData(skills=[Skill(id="s1", name="SQL")])
        example_store.dispatch(SetResumeData(replacement))
        replacement.skills[0].name = "changed"
        assert example_store.get_state().skills[0].name == "SQL"

    def test_previous_state_not_mutated(self, example_store):
        before = example_store.get_state()
        example_store.dispatch(SetResumeData(ResumeData()))
        assert before.personal_info.full_name == "Alex Doe"


class TestPersonalInfoAndSummary:
    def test_update_personal_info_merges(self, example_store):
        example_store.dispatch(UpdatePersonalInfo({"email": "new@example.com"}))
        info = example_store.get_state().personal_info
        assert info.email == "new@example.com"
        assert info.full_name == "Alex Doe"

    def test_update_personal_info_accepts_camel_case(self, example_store):
        example_store.dispatch(UpdatePersonalInfo({"fullName": "Jane Roe", "bogus": 1}))
        assert example_store.get_state().personal_info.full_name == "Jane Roe"

    def test_set_summary(self, example_store):
        example_store.dispatch(SetSummary(""))
        assert example_store.get_state().summary == ""


class TestListItems:
    def test_add_assigns_fresh_id(self, example_store):
        example_store.dispatch(AddListItem(Section.SKILLS, {"name": "Rust"}))
        skills = example_store.get_state().skills
        assert skills[-1].name == "Rust"
        assert skills[-1].id.startswith("id-")

    def test_add_with_duplicate_id_gets_new_id(self, example_store):
        example_store.dispatch(AddListItem(Section.EXPERIENCE, Experience(id="exp1", company="Dup")))
        state = example_store.get_state()
        assert state.experience[-1].company == "Dup"
        assert state.experience[-1].id != "exp1"
        ids = state.all_ids()
        assert len(ids) == len(set(ids))

    def test_add_blank_item(self, example_store):
        example_store.dispatch(AddListItem(Section.LANGUAGES))
        languages = example_store.get_state().languages
        assert len(languages) == 1
        assert languages[0].name == ""

    def test_update_item(self, example_store):
        example_store.dispatch(
            UpdateListItem(Section.EXPERIENCE, "exp2", {"company": "Web Innovators LLC"})
        )
        experience = example_store.get_state().experience
        assert experience[1].company == "Web Innovators LLC"
        assert experience[1].job_title == "Frontend Developer"
        assert experience[0].company == "Tech Solutions Inc."

    def test_update_cannot_change_id(self, example_store):
        example_store.dispatch(UpdateListItem(Section.EDUCATION, "edu1", {"id": "other"}))
        assert example_store.get_state().education[0].id == "edu1"

    def test_remove_item(self, example_store):
        example_store.dispatch(RemoveListItem(Section.EXPERIENCE, "exp1"))
        assert [e.id for e in example_store.get_state().experience] == ["exp2"]

    def test_reorder_item(self, example_store):
        example_store.dispatch(ReorderListItem(Section.EXPERIENCE, "exp2", 0))
        assert [e.id for e in example_store.get_state().experience] == ["exp2", "exp1"]

    def test_reorder_clamps_index(self, example_store):
        example_store.dispatch(ReorderListItem(Section.EXPERIENCE, "exp1", 99))
        assert [e.id for e in example_store.get_state().experience] == ["exp2", "exp1"]


class TestUnknownIds:
    @pytest.mark.parametrize(
        "action",
        [
            RemoveListItem(Section.SKILLS, "missing"),
            UpdateListItem(Section.SKILLS, "missing", {"name": "x"}),
            ReorderListItem(Section.SKILLS, "missing", 0),
        ],
    )
    def test_unknown_id_is_noop(self, example_store, action):
        before = example_store.get_state()
        example_store.dispatch(action)
        assert example_store.get_state() == before
        assert example_store.get_state() == EXAMPLE_RESUME

    def test_remove_twice_same_as_once(self, example_store):
        example_store.dispatch(RemoveListItem(Section.SKILLS, "skill1"))
        once = example_store.get_state()
        example_store.dispatch(RemoveListItem(Section.SKILLS, "skill1"))
        assert example_store.get_state() == once


class TestCreateStore:
    def test_example_bootstrap(self):
        store = create_store(EditorConfig(bootstrap="example"))
        assert store.get_state() == EXAMPLE_RESUME
        assert store.get_state() is not EXAMPLE_RESUME

    def test_blank_bootstrap(self):
        store = create_store(EditorConfig(bootstrap="blank"))
        assert store.get_state() == ResumeData()
