"""Optimization rules.

Rules propose a replacement for a line. Some proposals carry an edit that is
applied to the optimized output, the rest are commentary only. Edits never
touch the scanned source; they are folded into a per-line state afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Literal, Optional, Union, get_args

from codequality.analyzers.base import LineContext, LineRule, SourceFile, run_rules
from codequality.analyzers.patterns import (
    APPEND_ASSIGNMENT,
    CACHED_LENGTH_LOOP,
    INNER_HTML,
    LEADING_TABS,
    MAGIC_NUMBER,
    PROPERTY_CHAIN,
    SECRET_NAME,
    SINGLE_LETTER,
    TERNARY_TOKEN,
)

OptimizationType = Literal["performance", "readability", "security", "all"]

OPTIMIZATION_TYPES: tuple[str, ...] = get_args(OptimizationType)


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OptimizationCategory(str, Enum):
    PERFORMANCE = "performance"
    READABILITY = "readability"
    SECURITY = "security"
    MAINTAINABILITY = "maintainability"


@dataclass(frozen=True)
class Substitute:
    """Replace ``old`` with ``new`` in the working text of a line."""

    old: str
    new: str
    count: int = 1


@dataclass(frozen=True)
class Remove:
    """Drop the line from the optimized output."""


Edit = Union[Substitute, Remove]


@dataclass(frozen=True)
class Keep:
    text: str


@dataclass(frozen=True)
class Replace:
    text: str


@dataclass(frozen=True)
class Delete:
    pass


LineState = Union[Keep, Replace, Delete]


@dataclass(frozen=True)
class OptimizationSuggestion:
    """An optimization finding with its replacement candidate."""

    rule_id: str
    line: int
    column: int
    original_line: str
    optimized_line: str
    reason: str
    impact: Impact
    category: OptimizationCategory
    edit: Optional[Edit] = None

    @property
    def applied(self) -> bool:
        return self.edit is not None


def _suggest(
    ctx: LineContext,
    rule_id: str,
    optimized: str,
    reason: str,
    impact: Impact,
    category: OptimizationCategory,
    edit: Optional[Edit] = None,
    column: int = 1,
) -> OptimizationSuggestion:
    return OptimizationSuggestion(
        rule_id=rule_id,
        line=ctx.number,
        column=column,
        original_line=ctx.raw,
        optimized_line=optimized,
        reason=reason,
        impact=impact,
        category=category,
        edit=edit,
    )


# Performance


def _cache_array_length(ctx: LineContext) -> list[OptimizationSuggestion]:
    match = CACHED_LENGTH_LOOP.search(ctx.raw)
    if not match:
        return []
    var, seq = match.group("var"), match.group("seq")
    replacement = f"for (let {var} = 0, len = {seq}.length; {var} < len; {var}++)"
    edit = Substitute(match.group(0), replacement)
    return [
        _suggest(
            ctx,
            "cache-array-length",
            ctx.raw.replace(edit.old, edit.new, 1),
            "Cache the array length to avoid recomputing it on every iteration",
            Impact.MEDIUM,
            OptimizationCategory.PERFORMANCE,
            edit=edit,
            column=match.start() + 1,
        )
    ]


def _split_concatenation(expr: str) -> Optional[list[str]]:
    """Split ``a + 'b' + c`` at top-level plus signs, or None if unbalanced."""
    parts: list[str] = []
    current: list[str] = []
    quote: Optional[str] = None
    escaped = False
    for char in expr:
        if quote:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
        elif char in "\"'":
            quote = char
            current.append(char)
        elif char == "+":
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    if quote:
        return None
    parts.append("".join(current).strip())
    if not all(parts):
        return None
    return parts


def _template_literal(target: str, expr: str) -> Optional[str]:
    if "`" in expr or "${" in expr or "//" in expr:
        return None
    parts = _split_concatenation(expr)
    if not parts:
        return None
    pieces = []
    has_literal = False
    for part in parts:
        if len(part) >= 2 and part[0] in "\"'" and part[-1] == part[0]:
            pieces.append(part[1:-1])
            has_literal = True
        else:
            pieces.append("${" + part + "}")
    if not has_literal:
        return None
    return f"{target} = `${{{target}}}{''.join(pieces)}`"


def _prefer_template_literal(ctx: LineContext) -> list[OptimizationSuggestion]:
    if "+=" not in ctx.trimmed or not ("'" in ctx.trimmed or '"' in ctx.trimmed):
        return []
    match = APPEND_ASSIGNMENT.search(ctx.raw)
    if not match:
        return []
    expr = match.group("expr").rstrip()
    template = _template_literal(match.group("target"), expr)
    if template is None:
        return []
    edit = Substitute(ctx.raw[match.start("target") : match.start("expr") + len(expr)], template)
    return [
        _suggest(
            ctx,
            "prefer-template-literal",
            ctx.raw.replace(edit.old, edit.new, 1),
            "Use a template literal instead of string concatenation",
            Impact.LOW,
            OptimizationCategory.PERFORMANCE,
            edit=edit,
            column=match.start() + 1,
        )
    ]


def _cache_property_chain(ctx: LineContext) -> list[OptimizationSuggestion]:
    match = PROPERTY_CHAIN.search(ctx.raw)
    if not match:
        return []
    head = ".".join(match.group(0).split(".")[:2])
    optimized = (
        f"// Suggestion: {ctx.raw.lstrip()}\n"
        f"{ctx.indent}const cached = {head}; // cache the object reference"
    )
    return [
        _suggest(
            ctx,
            "cache-property-chain",
            optimized,
            "Avoid repeatedly walking a deep property chain",
            Impact.LOW,
            OptimizationCategory.PERFORMANCE,
            column=match.start() + 1,
        )
    ]


# Readability


def _descriptive_names(ctx: LineContext) -> list[OptimizationSuggestion]:
    if "for (" in ctx.trimmed:
        return []
    match = SINGLE_LETTER.search(ctx.raw)
    if not match:
        return []
    return [
        _suggest(
            ctx,
            "descriptive-names",
            "// Use a more meaningful variable name",
            "Single-letter variable names reduce readability",
            Impact.MEDIUM,
            OptimizationCategory.READABILITY,
            column=match.start() + 1,
        )
    ]


def _simplify_ternary(ctx: LineContext) -> list[OptimizationSuggestion]:
    if "? " not in ctx.trimmed or " : " not in ctx.trimmed:
        return []
    if len(TERNARY_TOKEN.findall(ctx.trimmed)) <= 2:
        return []
    return [
        _suggest(
            ctx,
            "simplify-ternary",
            "// Suggestion: refactor the nested ternary expression into if/else statements",
            "Simplify complex ternary expressions to improve readability",
            Impact.HIGH,
            OptimizationCategory.READABILITY,
            column=ctx.column_of("?"),
        )
    ]


def _extract_constant(ctx: LineContext) -> list[OptimizationSuggestion]:
    match = MAGIC_NUMBER.search(ctx.raw)
    if not match:
        return []
    optimized = f"// Suggestion: define a constant\nconst MAGIC_NUMBER = {match.group(1)};\n{ctx.raw}"
    return [
        _suggest(
            ctx,
            "extract-constant",
            optimized,
            "Extract the magic number into a named constant",
            Impact.MEDIUM,
            OptimizationCategory.READABILITY,
            column=match.start() + 1,
        )
    ]


# Security


def _avoid_eval(ctx: LineContext) -> list[OptimizationSuggestion]:
    if "eval(" not in ctx.trimmed:
        return []
    return [
        _suggest(
            ctx,
            "avoid-eval",
            "// Security warning: avoid eval(); use JSON.parse() or another safe alternative",
            "eval() exposes the code to injection attacks",
            Impact.HIGH,
            OptimizationCategory.SECURITY,
            column=ctx.column_of("eval("),
        )
    ]


def _prefer_text_content(ctx: LineContext) -> list[OptimizationSuggestion]:
    match = INNER_HTML.search(ctx.raw)
    if not match:
        return []
    edit = Substitute("innerHTML", "textContent")
    return [
        _suggest(
            ctx,
            "prefer-text-content",
            ctx.raw.replace(edit.old, edit.new, edit.count),
            "Use textContent instead of innerHTML to prevent XSS",
            Impact.HIGH,
            OptimizationCategory.SECURITY,
            edit=edit,
            column=match.start() + 1,
        )
    ]


def _hardcoded_secret(ctx: LineContext) -> list[OptimizationSuggestion]:
    trimmed = ctx.trimmed
    if not SECRET_NAME.search(trimmed) or "=" not in trimmed:
        return []
    if '"' not in trimmed and "'" not in trimmed:
        return []
    return [
        _suggest(
            ctx,
            "hardcoded-secret",
            "// Security warning: do not hardcode sensitive values; read them from environment variables",
            "Hardcoded sensitive values are a security risk",
            Impact.HIGH,
            OptimizationCategory.SECURITY,
        )
    ]


# Formatting, independent of the requested optimization type


def _collapse_blank_lines(ctx: LineContext) -> list[OptimizationSuggestion]:
    previous = ctx.previous
    if ctx.trimmed or previous is None or previous.strip():
        return []
    return [
        _suggest(
            ctx,
            "collapse-blank-lines",
            "",
            "Remove redundant blank lines",
            Impact.LOW,
            OptimizationCategory.READABILITY,
            edit=Remove(),
        )
    ]


def _normalize_indentation(ctx: LineContext) -> list[OptimizationSuggestion]:
    if not ctx.source.has_space_indent:
        return []
    match = LEADING_TABS.match(ctx.raw)
    if not match:
        return []
    tabs = match.group(0)
    edit = Substitute(tabs, "  " * len(tabs))
    return [
        _suggest(
            ctx,
            "normalize-indentation",
            edit.new + ctx.raw[len(tabs) :],
            "Use spaces consistently for indentation",
            Impact.LOW,
            OptimizationCategory.READABILITY,
            edit=edit,
        )
    ]


def _strip_comment(ctx: LineContext) -> list[OptimizationSuggestion]:
    if not ctx.trimmed.startswith("//"):
        return []
    return [
        _suggest(
            ctx,
            "strip-comment",
            "",
            "Comment removed because comments were not requested in the output",
            Impact.LOW,
            OptimizationCategory.MAINTAINABILITY,
            edit=Remove(),
        )
    ]


OPTIMIZATION_RULES: tuple[LineRule[OptimizationSuggestion], ...] = (
    LineRule("cache-array-length", _cache_array_length, group="performance"),
    LineRule("prefer-template-literal", _prefer_template_literal, group="performance"),
    LineRule("cache-property-chain", _cache_property_chain, group="performance"),
    LineRule("descriptive-names", _descriptive_names, group="readability"),
    LineRule("simplify-ternary", _simplify_ternary, group="readability"),
    LineRule("extract-constant", _extract_constant, group="readability"),
    LineRule("avoid-eval", _avoid_eval, group="security"),
    LineRule("prefer-text-content", _prefer_text_content, group="security"),
    LineRule("hardcoded-secret", _hardcoded_secret, group="security"),
    LineRule("collapse-blank-lines", _collapse_blank_lines, group="formatting"),
    LineRule("normalize-indentation", _normalize_indentation, group="formatting"),
    LineRule("strip-comment", _strip_comment, group="comments"),
)


def fold_edits(
    source: SourceFile,
    suggestions: Iterable[OptimizationSuggestion],
) -> list[LineState]:
    """Reduce the suggestions' edits to one state per source line.

    Removing a line can leave two blank lines next to each other, so a blank
    line that follows another kept blank line is dropped as well.
    """
    states: list[LineState] = [Keep(line) for line in source.lines]
    for suggestion in suggestions:
        index = suggestion.line - 1
        state = states[index]
        if isinstance(suggestion.edit, Remove):
            states[index] = Delete()
        elif isinstance(suggestion.edit, Substitute) and not isinstance(state, Delete):
            edit = suggestion.edit
            states[index] = Replace(state.text.replace(edit.old, edit.new, edit.count))

    previous_blank = False
    for index, state in enumerate(states):
        if isinstance(state, Delete):
            continue
        blank = not state.text.strip()
        if blank and previous_blank:
            states[index] = Delete()
        previous_blank = blank
    return states


def render(states: Iterable[LineState], trailing_newline: bool = False) -> str:
    kept = [state.text for state in states if not isinstance(state, Delete)]
    text = "\n".join(kept)
    if trailing_newline and kept:
        text += "\n"
    return text


@dataclass(frozen=True)
class OptimizationPass:
    suggestions: list[OptimizationSuggestion]
    optimized_code: str


class OptimizationAnalyzer:
    """Runs the optimization rule table and assembles the optimized text."""

    name = "optimization"

    def __init__(
        self,
        rules: tuple[LineRule[OptimizationSuggestion], ...] = OPTIMIZATION_RULES,
    ) -> None:
        self.rules = rules

    def groups_for(self, optimization_type: str, preserve_comments: bool = True) -> set[str]:
        if optimization_type not in OPTIMIZATION_TYPES:
            raise ValueError(f"Unknown optimization type: {optimization_type}")
        if optimization_type == "all":
            groups = {"performance", "readability", "security"}
        else:
            groups = {optimization_type}
        groups.add("formatting")
        if not preserve_comments:
            groups.add("comments")
        return groups

    def analyze(
        self,
        code: str,
        optimization_type: str = "all",
        preserve_comments: bool = True,
    ) -> OptimizationPass:
        source = SourceFile.from_code(code)
        groups = self.groups_for(optimization_type, preserve_comments)
        suggestions = run_rules(source, (rule for rule in self.rules if rule.group in groups))
        states = fold_edits(source, suggestions)
        return OptimizationPass(
            suggestions=suggestions,
            optimized_code=render(states, trailing_newline=code.endswith("\n")),
        )
