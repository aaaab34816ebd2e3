import pytest

from review_engine.config import DEFAULT_ANALYSIS_DELAY_SEC, get_analysis_delay, get_log_level


def test_delay_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REVIEW_ANALYSIS_DELAY_SEC", raising=False)
    assert get_analysis_delay() == DEFAULT_ANALYSIS_DELAY_SEC


def test_delay_never_negative(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVIEW_ANALYSIS_DELAY_SEC", "-3")
    assert get_analysis_delay() == 0.0


def test_log_level_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert get_log_level() == "DEBUG"
