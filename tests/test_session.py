"""Tests for ReviewSession, the state holder behind the UI."""

import pytest

from review_engine.languages import Language
from review_engine.session import ReviewSession


@pytest.fixture
def session() -> ReviewSession:
    return ReviewSession(delay=0)


class TestSynchronousSession:
    def test_initial_state(self, session: ReviewSession) -> None:
        assert session.snapshot() == {
            "code": "",
            "language": None,
            "findings": [],
            "tips": [],
            "is_analyzing": False,
            "theme": "dark",
        }
        assert not session.can_analyze()

    def test_blank_code_is_ignored(self, session: ReviewSession) -> None:
        assert session.analyze("   ") is False
        assert session.language is None

    def test_analyze_delivers_results(self, session: ReviewSession) -> None:
        assert session.analyze("var a = 1;\nwhile(true) {}") is True

        assert session.language is Language.JAVASCRIPT
        assert [f.severity for f in session.findings] == ["warning", "logical"]
        assert session.is_analyzing is False
        assert session.can_analyze()

    def test_new_run_replaces_previous_results(self, session: ReviewSession) -> None:
        session.analyze("var a = 1;\n" + "x" * 150)
        assert session.tips

        session.analyze('print("ok")')

        assert session.language is Language.PYTHON
        assert session.findings == []
        assert session.tips == []


class TestDelayedSession:
    def test_results_arrive_after_delay(self) -> None:
        session = ReviewSession(delay=0.2)

        session.analyze("var a = 1;\nif (a == 1) {}")

        assert session.is_analyzing is True
        assert session.language is Language.JAVASCRIPT
        assert session.findings == []
        assert not session.can_analyze()

        assert session.wait(timeout=5)
        assert session.is_analyzing is False
        assert [f.line_number for f in session.findings] == [1, 2]

    def test_newer_request_supersedes_pending_one(self) -> None:
        session = ReviewSession(delay=0.2)

        session.analyze("const a = 1;\nif (a == 1) {}")
        session.analyze('print "hi"\nimport os')

        assert session.wait(timeout=5)
        assert session.language is Language.PYTHON
        assert [f.message for f in session.findings] == ["Python 3 print requires parentheses."]

    def test_cancel_drops_pending_result(self) -> None:
        session = ReviewSession(delay=0.2)

        session.analyze("const a = 1;\nif (a == 1) {}")
        session.cancel()

        assert session.wait(timeout=0)
        assert session.is_analyzing is False
        assert session.findings == []


class TestTheme:
    def test_toggle(self, session: ReviewSession) -> None:
        assert session.toggle_theme() == "light"
        assert session.toggle_theme() == "dark"

    def test_unknown_theme_falls_back_to_dark(self) -> None:
        assert ReviewSession(delay=0, theme="neon").theme == "dark"


class TestDelayConfig:
    def test_delay_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REVIEW_ANALYSIS_DELAY_SEC", "0.25")

        assert ReviewSession().delay == 0.25

    def test_invalid_delay_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REVIEW_ANALYSIS_DELAY_SEC", "soon")

        assert ReviewSession().delay == 0.8

    def test_negative_delay_clamped(self) -> None:
        assert ReviewSession(delay=-1).delay == 0.0
