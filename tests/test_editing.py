from __future__ import annotations

import pytest

from resume_studio.constants.defaults import EMPTY_RESUME_DATA, INITIAL_RESUME_DATA
from resume_studio.models import FormattingSettings, ResumeDocument, TemplateType
from resume_studio.services.editing import (
    Section,
    add_entry,
    add_line,
    remove_entry,
    remove_line,
    update_entry,
    update_line,
    update_profile,
    update_settings,
)


@pytest.mark.parametrize("section", list(Section))
def test_update_with_unknown_id_is_noop(section: Section) -> None:
    result = update_entry(INITIAL_RESUME_DATA, section, "missing", "id", "x")
    assert result == INITIAL_RESUME_DATA
    result = update_entry(INITIAL_RESUME_DATA, section, "missing", "description", "x")
    assert result == INITIAL_RESUME_DATA


@pytest.mark.parametrize("section", list(Section))
def test_remove_with_unknown_id_is_noop(section: Section) -> None:
    assert remove_entry(INITIAL_RESUME_DATA, section, "missing") == INITIAL_RESUME_DATA


@pytest.mark.parametrize("section", list(Section))
def test_repeated_adds_produce_distinct_ids(section: Section) -> None:
    document = INITIAL_RESUME_DATA
    for _ in range(25):
        document = add_entry(document, section)
    ids = [entry.id for entry in getattr(document, section.value)]
    assert len(ids) == len(set(ids))


def test_add_entry_defaults() -> None:
    document = add_entry(EMPTY_RESUME_DATA, Section.EXPERIENCE)
    (entry,) = document.experience
    assert entry.company == "Company Name"
    assert entry.role == "Role"
    assert entry.description == ("Captured requirements...",)

    document = add_entry(document, Section.PROJECTS)
    assert document.projects[0].title == "New Project"
    assert document.projects[0].description == ("Description line 1",)

    document = add_entry(document, Section.SKILLS)
    assert document.skills[0].name == "Category"


def test_operations_do_not_mutate_input() -> None:
    before = INITIAL_RESUME_DATA.to_wire()
    update_entry(INITIAL_RESUME_DATA, Section.EXPERIENCE, "1", "company", "Other")
    add_line(INITIAL_RESUME_DATA, Section.PROJECTS, "1")
    remove_entry(INITIAL_RESUME_DATA, Section.SKILLS, "1")
    assert INITIAL_RESUME_DATA.to_wire() == before


def test_update_entry_accepts_alias_field_name() -> None:
    document = update_entry(
        INITIAL_RESUME_DATA, Section.PROJECTS, "1", "githubLink", "github.com/x/y"
    )
    assert document.projects[0].github_link == "github.com/x/y"
    assert document.projects[1] == INITIAL_RESUME_DATA.projects[1]


def test_update_entry_wraps_single_description_line() -> None:
    document = update_entry(INITIAL_RESUME_DATA, Section.EXPERIENCE, "1", "description", "Led team")
    assert document.experience[0].description == ("Led team",)

    document = update_entry(document, Section.PROJECTS, "1", "description", ["a", "b"])
    assert document.projects[0].description == ("a", "b")


def test_update_entry_cannot_change_id() -> None:
    assert update_entry(INITIAL_RESUME_DATA, Section.SKILLS, "1", "id", "9") == INITIAL_RESUME_DATA


def test_remove_entry_keeps_order() -> None:
    document = remove_entry(INITIAL_RESUME_DATA, Section.SKILLS, "2")
    assert [skill.id for skill in document.skills] == ["1", "3", "4", "5"]


def test_add_line_appends_empty_string() -> None:
    document = add_line(INITIAL_RESUME_DATA, Section.EXPERIENCE, "1")
    before = INITIAL_RESUME_DATA.experience[0].description
    after = document.experience[0].description
    assert len(after) == len(before) + 1
    assert after[-1] == ""
    assert after[:-1] == before


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_remove_line_out_of_range_is_noop(index: int) -> None:
    assert remove_line(INITIAL_RESUME_DATA, Section.PROJECTS, "1", index) == INITIAL_RESUME_DATA


def test_remove_line_removes_exactly_that_line() -> None:
    before = INITIAL_RESUME_DATA.projects[0].description
    document = remove_line(INITIAL_RESUME_DATA, Section.PROJECTS, "1", 1)
    assert document.projects[0].description == (before[0], before[2])


def test_update_line() -> None:
    document = update_line(INITIAL_RESUME_DATA, Section.EXPERIENCE, "2", 0, "<b>New</b>")
    assert document.experience[1].description[0] == "<b>New</b>"
    assert document.experience[0] == INITIAL_RESUME_DATA.experience[0]


def test_line_operations_ignore_sections_without_bullets() -> None:
    assert add_line(INITIAL_RESUME_DATA, Section.SKILLS, "1") == INITIAL_RESUME_DATA


def test_update_profile() -> None:
    document = update_profile(EMPTY_RESUME_DATA, "fullName", "Sam Lee")
    assert document.profile.full_name == "Sam Lee"
    assert update_profile(EMPTY_RESUME_DATA, "nickname", "x") == EMPTY_RESUME_DATA


def test_update_settings_starts_from_defaults() -> None:
    document = update_settings(ResumeDocument(), "template", "MINIMALIST")
    assert document.settings == FormattingSettings(template=TemplateType.MINIMALIST)


def test_update_settings_clamps() -> None:
    document = update_settings(EMPTY_RESUME_DATA, "marginTop", 80)
    assert document.effective_settings.margin_top == 50


def test_update_settings_invalid_type_is_noop() -> None:
    assert update_settings(EMPTY_RESUME_DATA, "lineHeight", "tall") == EMPTY_RESUME_DATA
