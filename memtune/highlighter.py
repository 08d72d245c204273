"""Syntax colouring of C and C++ source lines."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TextFormat:
    """A named text style with its foreground colour."""

    name: str
    color: tuple[int, int, int]


KEYWORD = TextFormat("keyword", (86, 156, 214))
TYPE_KEYWORD = TextFormat("type keyword", (51, 172, 174))
PREPROCESSOR = TextFormat("preprocessor", (189, 99, 197))
PREPROCESSOR_DIRECTIVE = TextFormat("preprocessor directive", (155, 155, 155))
PREPROCESSOR_DIAGNOSTIC = TextFormat("preprocessor diagnostic", (255, 67, 54))
QUOTATION = TextFormat("quotation", (214, 157, 133))
INCLUDE = TextFormat("include", (214, 157, 133))
FUNCTION = TextFormat("function", (78, 201, 176))
QUALIFIED_FUNCTION = TextFormat("qualified function", (78, 201, 176))
COMMENT = TextFormat("comment", (86, 164, 51))
MULTILINE_COMMENT = TextFormat("multi-line comment", (86, 164, 51))


@dataclass(frozen=True)
class HighlightRule:
    """A pattern whose first match in a line gets a format."""

    pattern: re.Pattern[str]
    format: TextFormat


_KEYWORDS = (
    "class", "const", "enum", "explicit", "friend", "inline", "new", "delete",
    "namespace", "operator", "private", "protected", "public", "signals", "break",
    "case", "slots", "static", "struct", "template", "typedef", "typename",
    "union", "virtual", "return", "volatile",
)
_TYPE_KEYWORDS = (
    "char", "double", "int", "long", "namespace", "short", "signed", "unsigned",
    "uint8_t", "uint16_t", "uint32_t", "uint64_t", "int8_t", "int16_t", "int32_t",
    "int64_t", "void", "volatile", "size_t",
)
_DIRECTIVES = ("include", "if", "ifdef", "ifndef", "elif", "define", "undef", "else", "endif")
_DIAGNOSTICS = ("warning", "error")

_BLOCK_COMMENT = re.compile(r"/\*(.*?)\*/", re.DOTALL)


def _word_rules(words: Iterable[str], prefix: str, fmt: TextFormat) -> list[HighlightRule]:
    return [HighlightRule(re.compile(prefix + rf"\b{word}\b"), fmt) for word in words]


def default_rules() -> list[HighlightRule]:
    """The C++ rules, in the order they are applied; later ones win."""
    rules = _word_rules(_KEYWORDS, "", KEYWORD)
    rules += _word_rules(_TYPE_KEYWORDS, "", TYPE_KEYWORD)
    rules.append(HighlightRule(re.compile(r"#.*"), PREPROCESSOR))
    rules += _word_rules(_DIRECTIVES, "#", PREPROCESSOR_DIRECTIVE)
    rules += _word_rules(_DIAGNOSTICS, "#", PREPROCESSOR_DIAGNOSTIC)
    rules += [
        HighlightRule(re.compile(r'".*"'), QUOTATION),
        HighlightRule(re.compile(r"<.*>"), INCLUDE),
        HighlightRule(re.compile(r"\b[A-Za-z0-9_]+(?=\()"), FUNCTION),
        HighlightRule(re.compile(r"\b[A-Za-z0-9_]+::[A-Za-z0-9_]+(?=\()"), QUALIFIED_FUNCTION),
        HighlightRule(re.compile(r"\b[A-Za-z0-9_]+::~[A-Za-z0-9_]+(?=\()"), QUALIFIED_FUNCTION),
        HighlightRule(re.compile(r"//[^\n]*"), COMMENT),
    ]
    return rules


def _apply(formats: list[TextFormat | None], match: re.Match[str], fmt: TextFormat) -> None:
    for group in range(match.re.groups, -1, -1):
        start, end = match.span(group)
        if start >= 0:
            formats[start:end] = [fmt] * (end - start)


def highlight_block(
    text: str, rules: Iterable[HighlightRule] | None = None
) -> list[TextFormat | None]:
    """Format of every character of ``text``; ``None`` where none applies.

    Each rule formats only its first match. A ``/* ... */`` comment is
    applied last and overrides everything it covers.
    """
    formats: list[TextFormat | None] = [None] * len(text)
    for rule in default_rules() if rules is None else rules:
        match = rule.pattern.search(text)
        if match:
            _apply(formats, match, rule.format)
    comment = _BLOCK_COMMENT.search(text)
    if comment:
        start, end = comment.span()
        formats[start:end] = [MULTILINE_COMMENT] * (end - start)
    return formats


class Highlighter:
    """Applies a fixed rule set to lines of source text."""

    def __init__(self, rules: Iterable[HighlightRule] | None = None) -> None:
        self.rules: list[HighlightRule] = default_rules() if rules is None else list(rules)

    def highlight(self, text: str) -> list[TextFormat | None]:
        """Format of every character of ``text``."""
        return highlight_block(text, self.rules)