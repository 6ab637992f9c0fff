from __future__ import annotations

import threading

import pytest

from resume_studio.constants.defaults import INITIAL_RESUME_DATA
from resume_studio.services.editing import Section, update_line, update_profile
from resume_studio.services.enhancement import EnhancementGateway
from resume_studio.services.session import EditingSession


class GatedEnhancer:
    """Backend that blocks each call until its gate is opened."""

    def __init__(self) -> None:
        self.gates: dict[str, threading.Event] = {}
        self.seen: list[str] = []

    def improve(self, text: str, context: str) -> str:
        self.seen.append(text)
        self.gates.setdefault(context, threading.Event()).wait(timeout=5)
        return f"{context}: {text}"

    def generate(self, topic: str) -> str:
        return ""

    def release(self, context: str) -> None:
        self.gates.setdefault(context, threading.Event()).set()


def _first_line(document, value: str):
    return update_line(document, Section.EXPERIENCE, "1", 0, value)


@pytest.fixture
def gated() -> GatedEnhancer:
    return GatedEnhancer()


@pytest.fixture
def session(gated: GatedEnhancer):
    with EditingSession(INITIAL_RESUME_DATA, EnhancementGateway(gated)) as editing:
        yield editing
    for gate in gated.gates.values():
        gate.set()


def test_apply_replaces_document(session: EditingSession) -> None:
    before = session.document
    after = session.apply(update_profile, "fullName", "Sam")

    assert session.document is after
    assert after.profile.full_name == "Sam"
    assert before.profile.full_name == "Alex Chen"


def test_preview_uses_current_document_and_scale(session: EditingSession) -> None:
    session.apply(update_profile, "fullName", "Sam")
    session.fit.resize(300)

    page = session.preview()
    assert "Sam" in page.text()
    assert page.root.style["transform"] == "scale(0.6)"


def test_enhance_strips_markup_and_applies_result(
    session: EditingSession, gated: GatedEnhancer
) -> None:
    gated.release("ctx")
    future = session.enhance("exp-1-0", "Cut <b>latency</b>", "ctx", _first_line)

    assert future.result(timeout=5) == "ctx: Cut latency"
    assert gated.seen == ["Cut latency"]
    assert session.document.experience[0].description[0] == "ctx: Cut latency"
    assert not session.is_pending("exp-1-0")


def test_pending_fields_tracked_until_completion(
    session: EditingSession, gated: GatedEnhancer
) -> None:
    future = session.enhance("exp-1-0", "text", "slow", _first_line)

    assert session.is_pending("exp-1-0")
    assert session.pending_fields == frozenset({"exp-1-0"})

    gated.release("slow")
    future.result(timeout=5)
    assert session.pending_fields == frozenset()


def test_result_applies_to_document_at_completion_time(
    session: EditingSession, gated: GatedEnhancer
) -> None:
    future = session.enhance("exp-1-0", "text", "slow", _first_line)
    session.apply(update_profile, "fullName", "Edited Meanwhile")

    gated.release("slow")
    future.result(timeout=5)

    assert session.document.profile.full_name == "Edited Meanwhile"
    assert session.document.experience[0].description[0] == "slow: text"


def test_last_response_wins(session: EditingSession, gated: GatedEnhancer) -> None:
    first = session.enhance("exp-1-0", "one", "first", _first_line)
    second = session.enhance("exp-1-0", "two", "second", _first_line)

    gated.release("second")
    second.result(timeout=5)
    assert session.is_pending("exp-1-0") is False

    gated.release("first")
    first.result(timeout=5)
    assert session.document.experience[0].description[0] == "first: one"


def test_closed_session_drops_late_results(gated: GatedEnhancer) -> None:
    editing = EditingSession(INITIAL_RESUME_DATA, EnhancementGateway(gated))
    future = editing.enhance("exp-1-0", "text", "slow", _first_line)

    editing.close()
    gated.release("slow")
    future.result(timeout=5)

    assert editing.closed
    assert editing.document == INITIAL_RESUME_DATA
    with pytest.raises(RuntimeError):
        editing.enhance("exp-1-0", "text", "slow", _first_line)


def test_failed_enhancement_keeps_original_text(failing_enhancer) -> None:
    with EditingSession(INITIAL_RESUME_DATA, EnhancementGateway(failing_enhancer)) as editing:
        future = editing.enhance("exp-1-0", "Keep <i>this</i>", "ctx", _first_line)
        assert future.result(timeout=5) == "Keep this"
        assert editing.document.experience[0].description[0] == "Keep this"


def test_generate_with_empty_result_leaves_document(failing_enhancer) -> None:
    with EditingSession(INITIAL_RESUME_DATA, EnhancementGateway(failing_enhancer)) as editing:
        assert editing.generate("exp-1-0", "topic", _first_line).result(timeout=5) == ""
        assert editing.document == INITIAL_RESUME_DATA
