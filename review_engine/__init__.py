from review_engine.engine import Finding, ReviewReport, ReviewResult, analyze, review_code
from review_engine.languages import Language, detect_language
from review_engine.rules import Rule, rules_for
from review_engine.session import ReviewSession

__all__ = [
    "Finding",
    "Language",
    "ReviewReport",
    "ReviewResult",
    "ReviewSession",
    "Rule",
    "analyze",
    "detect_language",
    "review_code",
    "rules_for",
]
