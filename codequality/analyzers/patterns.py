"""Compiled patterns shared across rule sets."""

import re

# Bare integer literal of two or more digits.
MAGIC_NUMBER = re.compile(r"\b(\d{2,})\b")

# Quoted literal with at least 20 characters between the quotes.
LONG_STRING = re.compile(r"[\"']([^\"']{20,})[\"']")

COMPLEX_CONDITION = re.compile(r"if\s*\([^)]{50,}\)")

SINGLE_LETTER = re.compile(r"\b[a-z]\b")

TERNARY_TOKEN = re.compile(r"[?:]")

DECLARATION = re.compile(r"\b(?:var|let|const)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")

CACHED_LENGTH_LOOP = re.compile(
    r"for \(let (?P<var>[A-Za-z_$][\w$]*) = 0; (?P=var) < (?P<seq>[A-Za-z_$][\w$.]*)\.length; (?P=var)\+\+\)"
)

APPEND_ASSIGNMENT = re.compile(
    r"(?<![\w$.])(?P<target>[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*)\s*\+=\s*(?P<expr>[^;]*)"
)

PROPERTY_CHAIN = re.compile(r"(?<![\w$.])[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*){3,}")

INNER_HTML = re.compile(r"\binnerHTML\b")

SECRET_NAME = re.compile(r"password|secret|key")

LEADING_TABS = re.compile(r"^\t+")

COMMENT_PREFIXES = ("//", "/*")


def is_comment(trimmed: str) -> bool:
    return trimmed.startswith(COMMENT_PREFIXES) or trimmed.startswith("*")
