import re

from memtune.highlighter import (
    COMMENT,
    FUNCTION,
    INCLUDE,
    KEYWORD,
    MULTILINE_COMMENT,
    PREPROCESSOR,
    PREPROCESSOR_DIAGNOSTIC,
    PREPROCESSOR_DIRECTIVE,
    QUALIFIED_FUNCTION,
    QUOTATION,
    TYPE_KEYWORD,
    HighlightRule,
    Highlighter,
    TextFormat,
    default_rules,
    highlight_block,
)


def test_result_covers_every_character():
    text = "static int value = compute(3); // done"
    assert len(highlight_block(text)) == len(text)


def test_plain_text_is_unformatted():
    assert highlight_block("abc xyz") == [None] * 7


def test_type_keyword():
    formats = highlight_block("int x;")
    assert formats[:3] == [TYPE_KEYWORD] * 3
    assert formats[3:] == [None] * 3


def test_keyword():
    formats = highlight_block("return x;")
    assert formats[:6] == [KEYWORD] * 6


def test_only_first_match_of_a_rule():
    formats = highlight_block("int a; int b;")
    assert formats[0] == TYPE_KEYWORD
    assert formats[7] is None


def test_later_rule_wins_for_shared_words():
    assert highlight_block("namespace") == [TYPE_KEYWORD] * len("namespace")


def test_include_line():
    text = "#include <a.h>"
    formats = highlight_block(text)
    assert formats[:8] == [PREPROCESSOR_DIRECTIVE] * 8
    assert formats[8] == PREPROCESSOR
    assert formats[9:] == [INCLUDE] * (len(text) - 9)


def test_error_directive():
    formats = highlight_block("#error stop")
    assert formats[:6] == [PREPROCESSOR_DIAGNOSTIC] * 6
    assert formats[6:] == [PREPROCESSOR] * 5


def test_quotation_overrides_keyword():
    text = '"class"'
    assert highlight_block(text) == [QUOTATION] * len(text)


def test_function_and_line_comment():
    text = "foo(1); // class"
    formats = highlight_block(text)
    assert formats[:3] == [FUNCTION] * 3
    assert formats[3] is None
    assert formats[8:] == [COMMENT] * (len(text) - 8)


def test_destructor_is_qualified_function():
    text = "Foo::~Foo()"
    formats = highlight_block(text)
    assert formats[:9] == [QUALIFIED_FUNCTION] * 9
    assert formats[9:] == [None, None]


def test_block_comment_overrides():
    text = "/* int */ x"
    formats = highlight_block(text)
    assert formats[:9] == [MULTILINE_COMMENT] * 9
    assert formats[9:] == [None, None]


def test_custom_rules_with_groups():
    marker = TextFormat("marker", (1, 2, 3))
    rule = HighlightRule(re.compile(r"a(b)c"), marker)
    formats = highlight_block("xabcx", [rule])
    assert formats == [None, marker, marker, marker, None]


def test_highlighter_uses_default_rules():
    text = "#define X foo(y) // note"
    assert Highlighter().highlight(text) == highlight_block(text, default_rules())


def test_highlighter_with_no_rules_only_block_comments():
    formats = Highlighter([]).highlight("int /*c*/")
    assert formats[:4] == [None] * 4
    assert formats[4:] == [MULTILINE_COMMENT] * 5


def test_default_rule_formats_are_known():
    known = {
        KEYWORD, TYPE_KEYWORD, PREPROCESSOR, PREPROCESSOR_DIRECTIVE,
        PREPROCESSOR_DIAGNOSTIC, QUOTATION, INCLUDE, FUNCTION,
        QUALIFIED_FUNCTION, COMMENT,
    }
    assert {rule.format for rule in default_rules()} == known