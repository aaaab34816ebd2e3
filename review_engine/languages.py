import logging
import re
from enum import Enum
from typing import List, Tuple

logger = logging.getLogger(__name__)


class Language(str, Enum):
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"
    C = "C"
    CPP = "C++"
    JAVA = "Java"
    HTML = "HTML"
    CSS = "CSS"
    CSHARP = "C#"
    TYPESCRIPT = "TypeScript"
    UNKNOWN = "Unknown"


# Order matters: the first pattern that matches decides. C is tested before the
# broader C++ pattern, which would also accept a plain `#include <...>`.
DETECTION_PATTERNS: List[Tuple[re.Pattern, Language]] = [
    (re.compile(r"(function\s*\(|=>|const\s+\w+\s*=|let\s+\w+\s*=|var\s+\w+\s*=)"), Language.JAVASCRIPT),
    (re.compile(r"(def\s+\w+\s*\(|import\s+\w+|print\s*\(|from\s+\w+\s+import)"), Language.PYTHON),
    (re.compile(r"(#include\s*<|printf\s*\(|int\s+main\s*\()"), Language.C),
    (re.compile(r"(std::|#include\s*<|using\s+namespace|cout\s*<<)"), Language.CPP),
    (re.compile(r"(public\s+class|System\.out\.println|import\s+java\.)"), Language.JAVA),
    (re.compile(r"(<!DOCTYPE html>|<html|<div\s|class\s*=\s*\")"), Language.HTML),
    (re.compile(r"(\.\w+\s*\{|#\w+\s*\{|@media|color:\s*#)"), Language.CSS),
    (re.compile(r"(using\s+System|namespace\s+\w+|Console\.WriteLine)"), Language.CSHARP),
    (re.compile(r"(type\s+\w+\s*=|interface\s+\w+\s*\{|:\s*\w+\s*[;=])"), Language.TYPESCRIPT),
]


def detect_language(code: str) -> Language:
    """Guess the language of a snippet from the first matching marker.

    Markers are searched anywhere in the text, so one stray token (say a
    `cout <<` inside a comment) is enough to classify it.
    """
    text = code.strip()
    if not text:
        return Language.UNKNOWN
    for pattern, language in DETECTION_PATTERNS:
        if pattern.search(text):
            logger.debug("detect_language: %s (pattern %r)", language.value, pattern.pattern)
            return language
    logger.debug("detect_language: no marker matched")
    return Language.UNKNOWN
