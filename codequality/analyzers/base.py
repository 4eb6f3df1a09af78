"""Base analyzer interfaces shared by the three rule sets."""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar


def split_lines(code: str) -> list[str]:
    """Split source text into physical lines.

    A trailing newline terminates the last line instead of opening a new empty
    one, and a carriage return before the newline is dropped.
    """
    if not code:
        return []
    lines = code.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class SourceFile:
    """Scanned source plus the file-wide facts some rules depend on."""

    lines: tuple[str, ...]
    has_space_indent: bool = False

    @classmethod
    def from_code(cls, code: str) -> "SourceFile":
        lines = tuple(split_lines(code))
        return cls(
            lines=lines,
            has_space_indent=any(line.startswith("  ") for line in lines),
        )

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def contexts(self) -> Iterable["LineContext"]:
        for index, raw in enumerate(self.lines):
            yield LineContext(source=self, index=index, raw=raw, trimmed=raw.strip())


@dataclass(frozen=True)
class LineContext:
    """One line as seen by a rule."""

    source: SourceFile
    index: int
    raw: str
    trimmed: str

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def previous(self) -> str | None:
        if self.index == 0:
            return None
        return self.source.lines[self.index - 1]

    @property
    def indent(self) -> str:
        return self.raw[: len(self.raw) - len(self.raw.lstrip())]

    def window(self, size: int) -> tuple[str, ...]:
        """Return at most ``size`` raw lines starting at this one."""
        return self.source.lines[self.index : self.index + size]

    def column_of(self, token: str) -> int:
        """1-based column of ``token`` in the raw line, or 1 when absent."""
        return self.raw.find(token) + 1 or 1


F = TypeVar("F")


@dataclass(frozen=True)
class LineRule(Generic[F]):
    """A named predicate run against every line."""

    rule_id: str
    check: Callable[[LineContext], list[F]]
    group: str = "default"

    def __call__(self, context: LineContext) -> list[F]:
        return self.check(context)


def run_rules(
    source: SourceFile,
    rules: Iterable[LineRule[F]],
) -> list[F]:
    """Run an ordered rule table over every line, line-major."""
    rules = tuple(rules)
    findings: list[F] = []
    for context in source.contexts():
        for rule in rules:
            findings.extend(rule(context))
    return findings
