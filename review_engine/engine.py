import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from review_engine.languages import Language, detect_language
from review_engine.rules import LOGICAL, rules_for

logger = logging.getLogger(__name__)

LONG_LINE_THRESHOLD = 100
INFINITE_LOOP_MARKERS = ("while(true)", "for(;;)")


@dataclass(frozen=True)
class Finding:
    line_number: int
    message: str
    suggestion: str
    severity: str
    snippet: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.line_number,
            "message": self.message,
            "suggestion": self.suggestion,
            "type": self.severity,
            "snippet": self.snippet,
        }


class ReviewResult:
    def __init__(self) -> None:
        self.findings: List[Finding] = []
        self.tips: List[str] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReviewResult):
            return NotImplemented
        return self.findings == other.findings and self.tips == other.tips

    def to_dict(self) -> Dict[str, Any]:
        return {
            "findings": [finding.to_dict() for finding in self.findings],
            "tips": list(self.tips),
        }


class ReviewReport(ReviewResult):
    """A ReviewResult tagged with the language it was produced for."""

    def __init__(self, language: Language) -> None:
        super().__init__()
        self.language = language

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReviewReport):
            return NotImplemented
        return self.language == other.language and super().__eq__(other)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["language"] = self.language.value
        return payload


def analyze(lines: Sequence[str], language: Language) -> ReviewResult:
    """Run the language's line rules and the generic checks over `lines`.

    Findings from the per-language rules come first, ordered by line and then
    by rule order; the infinite-loop finding, if any, is appended last.
    """
    logger.info("analyze start (language=%s, lines=%d)", language.value, len(lines))
    res = ReviewResult()
    _apply_language_rules(lines, language, res)
    _apply_generic_checks(lines, res)
    logger.info("analyze end (findings=%d, tips=%d)", len(res.findings), len(res.tips))
    return res


def review_code(code: str, language: Optional[Language] = None) -> ReviewReport:
    """Detect (unless `language` is given), split on newlines and analyze."""
    if not code.strip():
        return ReviewReport(Language.UNKNOWN)
    detected = language or detect_language(code)
    result = analyze(code.split("\n"), detected)
    report = ReviewReport(detected)
    report.findings = result.findings
    report.tips = result.tips
    return report


def _apply_language_rules(lines: Sequence[str], language: Language, res: ReviewResult) -> None:
    rules = rules_for(language)
    if not rules:
        return
    for line_number, line in enumerate(lines, start=1):
        for rule in rules:
            if rule.pattern.search(line):
                res.findings.append(
                    Finding(
                        line_number=line_number,
                        message=rule.message,
                        suggestion=rule.suggestion,
                        severity=rule.severity,
                        snippet=line.strip(),
                    )
                )


def _apply_generic_checks(lines: Sequence[str], res: ReviewResult) -> None:
    for line_number, line in enumerate(lines, start=1):
        if len(line) > LONG_LINE_THRESHOLD:
            res.tips.append(f"Line {line_number} is long ({len(line)} chars). Consider splitting.")

    content = "".join(lines)
    if not any(marker in content for marker in INFINITE_LOOP_MARKERS):
        return

    # The joined text can match across a line boundary without any single line
    # containing a marker; that case is pinned to line 1 with no snippet.
    line_number, snippet = 1, None
    for index, line in enumerate(lines, start=1):
        if any(marker in line for marker in INFINITE_LOOP_MARKERS):
            line_number, snippet = index, line.strip()
            break
    res.findings.append(
        Finding(
            line_number=line_number,
            message="Potential infinite loop detected.",
            suggestion="Add a break condition.",
            severity=LOGICAL,
            snippet=snippet,
        )
    )
