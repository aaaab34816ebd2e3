import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from review_engine.languages import Language

SYNTAX = "syntax"
LOGICAL = "logical"
WARNING = "warning"
SEVERITIES = (SYNTAX, LOGICAL, WARNING)


@dataclass(frozen=True)
class Rule:
    pattern: re.Pattern
    severity: str
    message: str
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "pattern": self.pattern.pattern,
            "type": self.severity,
            "message": self.message,
            "suggestion": self.suggestion,
        }


def _rule(pattern: str, severity: str, message: str, suggestion: str) -> Rule:
    return Rule(re.compile(pattern), severity, message, suggestion)


LOOSE_EQUALITY = _rule(
    r"==[^=]",
    WARNING,
    "Loose equality (==) found.",
    "Use === for strict equality checks.",
)

RULEBOOK: Dict[Language, Tuple[Rule, ...]] = {
    Language.JAVASCRIPT: (
        LOOSE_EQUALITY,
        _rule(r"\bvar\b", WARNING, "Found var declaration.", "Use let or const for better scoping."),
        _rule(r"console\.log\([^)]*$", SYNTAX, "Possible missing semicolon.", "Add a semicolon at the end."),
    ),
    Language.TYPESCRIPT: (LOOSE_EQUALITY,),
    Language.PYTHON: (
        _rule(r"^.*print\s+[^()]", SYNTAX, "Python 3 print requires parentheses.", "Use print() instead of print."),
        _rule(r"^.*import \*", WARNING, "Wildcard import found.", "Avoid 'import *'. Import what you need."),
    ),
    Language.HTML: (
        _rule(r"<img\b(?!.*\balt=)", WARNING, "Image missing alt attribute.", "Add alt for accessibility."),
    ),
    Language.CSS: (
        _rule(r"!important", WARNING, "Avoid !important.", "Use more specific selectors instead."),
        _rule(r"px", WARNING, "Pixel units used.", "Consider rem/em for responsiveness."),
    ),
    # No coverage yet for these; they still get the generic checks.
    Language.C: (),
    Language.CPP: (),
    Language.JAVA: (),
    Language.CSHARP: (),
    Language.UNKNOWN: (),
}


def rules_for(language: Language) -> Tuple[Rule, ...]:
    return RULEBOOK.get(language, ())


def rulebook_as_dict() -> Dict[str, List[Dict[str, str]]]:
    return {
        language.value: [rule.to_dict() for rule in rules_for(language)]
        for language in Language
    }
