import logging
import threading
from typing import Any, Dict, List, Optional

from review_engine.config import get_analysis_delay
from review_engine.engine import Finding, analyze
from review_engine.languages import Language, detect_language

logger = logging.getLogger(__name__)

THEMES = ("dark", "light")


class ReviewSession:
    """State behind the paste-and-analyze page.

    The language is detected as soon as an analysis starts; findings and tips
    arrive after `delay` seconds. Each call to `analyze` bumps a generation
    counter, and a pending run only publishes its result if it is still the
    latest generation when its timer fires.
    """

    def __init__(self, delay: Optional[float] = None, theme: str = "dark") -> None:
        self.delay = get_analysis_delay() if delay is None else max(delay, 0.0)
        self.code = ""
        self.language: Optional[Language] = None
        self.findings: List[Finding] = []
        self.tips: List[str] = []
        self.is_analyzing = False
        self.theme = theme if theme in THEMES else "dark"
        self._lock = threading.Lock()
        self._generation = 0
        self._timer: Optional[threading.Timer] = None
        self._done = threading.Event()
        self._done.set()

    def can_analyze(self) -> bool:
        return bool(self.code.strip()) and not self.is_analyzing

    def analyze(self, code: Optional[str] = None) -> bool:
        """Start an analysis of `code` (or the current code).

        Returns False without touching state when the code is blank.
        """
        if code is not None:
            self.code = code
        if not self.code.strip():
            return False

        with self._lock:
            self._cancel_timer()
            self._generation += 1
            generation = self._generation
            self.is_analyzing = True
            self.findings = []
            self.tips = []
            self.language = detect_language(self.code)
            self._done.clear()
            lines = self.code.split("\n")
            language = self.language
            logger.info("session: analysis %d started (language=%s)", generation, language.value)

            if self.delay > 0:
                self._timer = threading.Timer(self.delay, self._deliver, args=(generation, lines, language))
                self._timer.daemon = True
                self._timer.start()
                return True

        self._deliver(generation, lines, language)
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the pending result is delivered; False on timeout."""
        return self._done.wait(timeout)

    def cancel(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._generation += 1
            self.is_analyzing = False
            self._done.set()

    def toggle_theme(self) -> str:
        self.theme = "light" if self.theme == "dark" else "dark"
        return self.theme

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "code": self.code,
                "language": self.language.value if self.language else None,
                "findings": [finding.to_dict() for finding in self.findings],
                "tips": list(self.tips),
                "is_analyzing": self.is_analyzing,
                "theme": self.theme,
            }

    def _deliver(self, generation: int, lines: List[str], language: Language) -> None:
        result = analyze(lines, language)
        with self._lock:
            if generation != self._generation:
                logger.info("session: analysis %d superseded; dropping result", generation)
                return
            self.findings = result.findings
            self.tips = result.tips
            self.is_analyzing = False
            self._timer = None
            self._done.set()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
