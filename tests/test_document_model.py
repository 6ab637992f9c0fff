from __future__ import annotations

import pytest
from pydantic import ValidationError

from resume_studio.constants.defaults import (
    DEFAULT_SETTINGS,
    EMPTY_RESUME_DATA,
    INITIAL_RESUME_DATA,
)
from resume_studio.constants.fonts import DEFAULT_FONT
from resume_studio.models import FormattingSettings, ResumeDocument, TemplateType


def test_default_settings_values() -> None:
    settings = FormattingSettings()
    assert (settings.margin_top, settings.margin_right) == (12, 15)
    assert (settings.margin_bottom, settings.margin_left) == (12, 15)
    assert settings.line_height == 1.4
    assert settings.section_spacing == 5
    assert settings.template is TemplateType.ADMIN_CLASSICAL
    assert settings.font == DEFAULT_FONT
    assert settings.background_color == "#FFFFFF"
    assert settings.accent_color == "#000000"


def test_effective_settings_substitutes_defaults() -> None:
    document = ResumeDocument()
    assert document.settings is None
    assert document.effective_settings == DEFAULT_SETTINGS


def test_wire_format_uses_camel_case() -> None:
    wire = INITIAL_RESUME_DATA.to_wire()
    assert wire["profile"]["fullName"] == "Alex Chen"
    assert wire["projects"][0]["githubLink"] == "github.com/alexchen-ml/gen-art"
    assert wire["settings"]["marginTop"] == 12
    assert wire["settings"]["template"] == "ADMIN_CLASSICAL"


def test_from_wire_round_trip() -> None:
    assert ResumeDocument.from_wire(INITIAL_RESUME_DATA.to_wire()) == INITIAL_RESUME_DATA


def test_from_wire_without_settings() -> None:
    document = ResumeDocument.from_wire({"profile": {"fullName": "Sam"}})
    assert document.profile.full_name == "Sam"
    assert document.settings is None
    assert "settings" not in document.to_wire()


@pytest.mark.parametrize(
    ("field", "value", "expected"),
    [
        ("marginTop", 120, 50),
        ("marginLeft", -3, 0),
        ("lineHeight", 3.5, 2.0),
        ("lineHeight", 0.2, 1.0),
        ("sectionSpacing", 40, 20),
    ],
)
def test_settings_are_clamped(field: str, value: float, expected: float) -> None:
    settings = FormattingSettings.model_validate({field: value})
    assert settings.model_dump(by_alias=True)[field] == expected


def test_unknown_template_resolves_to_classical() -> None:
    settings = FormattingSettings.model_validate({"template": "NEON_GRID"})
    assert settings.template is TemplateType.ADMIN_CLASSICAL


def test_unknown_font_resolves_to_default() -> None:
    settings = FormattingSettings.model_validate({"font": "Comic Sans MS"})
    assert settings.font == DEFAULT_FONT


def test_template_coerce() -> None:
    assert TemplateType.coerce("MINIMALIST") is TemplateType.MINIMALIST
    assert TemplateType.coerce(None) is TemplateType.ADMIN_CLASSICAL


def test_documents_are_immutable() -> None:
    with pytest.raises(ValidationError):
        EMPTY_RESUME_DATA.profile.full_name = "changed"  # type: ignore[misc]


def test_empty_document_shape() -> None:
    assert EMPTY_RESUME_DATA.profile.full_name == ""
    assert EMPTY_RESUME_DATA.education == ()
    assert EMPTY_RESUME_DATA.experience == ()
    assert EMPTY_RESUME_DATA.skills == ()
    assert EMPTY_RESUME_DATA.projects == ()
    assert EMPTY_RESUME_DATA.achievements == ()
