"""Tests for the stylesheet parser and aggregator."""

import pytest

from unclassify.errors import StylesheetParseError
from unclassify.model.source import Source
from unclassify.stylesheet import (
    AtStatement,
    GroupRule,
    StyleRule,
    Stylesheet,
    aggregate_stylesheets,
    parse_stylesheet,
)
from unclassify.stylesheet.parser import split_selectors


# ---------------------------------------------------------------------------
# Rule structure
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_single_rule(self):
        ss = parse_stylesheet(".foo { color: red; }")
        assert ss.rules == (StyleRule(selectors=(".foo",)),)

    def test_selector_list(self):
        ss = parse_stylesheet("h1, .title > a:hover, #main .nav { margin: 0 }")
        assert ss.rules[0].selectors == ("h1", ".title > a:hover", "#main .nav")

    def test_last_declaration_without_semicolon(self):
        ss = parse_stylesheet(".a { color: red; margin: 0 }")
        assert len(ss.rules) == 1

    def test_empty_block(self):
        ss = parse_stylesheet(".a {}")
        assert ss.rules == (StyleRule(selectors=(".a",)),)

    def test_braces_inside_strings(self):
        ss = parse_stylesheet('.a[data-x="{"] { content: "}"; }')
        assert ss.rules[0].selectors == ('.a[data-x="{"]',)

    def test_semicolon_inside_url(self):
        source = ".icon { background: url(data:image/png;base64,AAAA) no-repeat; }"
        ss = parse_stylesheet(source)
        assert ss.rules == (StyleRule(selectors=(".icon",)),)

    def test_comments_are_ignored(self):
        ss = parse_stylesheet("/* .ghost { } */ .real { color: red; /* inline */ }")
        assert ss.rules == (StyleRule(selectors=(".real",)),)

    def test_comment_inside_selector_list(self):
        ss = parse_stylesheet(".a /* .b */, .c { color: red; }")
        assert ss.rules[0].selectors == (".a", ".c")


class TestGroupRules:
    def test_media_block(self):
        ss = parse_stylesheet("@media (min-width: 1px) { .bar { color: blue; } }")
        assert ss.rules == (
            GroupRule(
                name="media",
                prelude="(min-width: 1px)",
                rules=(StyleRule(selectors=(".bar",)),),
            ),
        )

    def test_declaration_only_block(self):
        ss = parse_stylesheet("@font-face { font-family: Foo; src: url(foo.woff); }")
        assert ss.rules == (GroupRule(name="font-face", prelude="", rules=()),)

    def test_nested_group(self):
        ss = parse_stylesheet("@media screen { @supports (display: grid) { .g { } } }")
        outer = ss.rules[0]
        assert isinstance(outer, GroupRule)
        assert isinstance(outer.rules[0], GroupRule)
        assert outer.rules[0].name == "supports"

    def test_keyframes(self):
        ss = parse_stylesheet("@keyframes spin { from { opacity: 0 } 50% { opacity: .5 } to { opacity: 1 } }")
        group = ss.rules[0]
        assert group.name == "keyframes"
        assert [r.selectors for r in group.rules] == [("from",), ("50%",), ("to",)]

    def test_at_keyword_is_lowercased(self):
        ss = parse_stylesheet("@MEDIA print { .p { } }")
        assert ss.rules[0].name == "media"


class TestAtStatements:
    def test_import(self):
        ss = parse_stylesheet('@import url("base.css"); .a { }')
        assert ss.rules[0] == AtStatement(name="import", prelude='url("base.css")')
        assert ss.rules[1] == StyleRule(selectors=(".a",))

    def test_charset(self):
        ss = parse_stylesheet('@charset "utf-8";')
        assert ss.rules == (AtStatement(name="charset", prelude='"utf-8"'),)


class TestEmptyStylesheet:
    def test_empty_string(self):
        assert parse_stylesheet("") == Stylesheet(rules=())

    def test_whitespace_and_comments_only(self):
        assert parse_stylesheet("  \n/* nothing */\t").rules == ()


# ---------------------------------------------------------------------------
# Selector splitting
# ---------------------------------------------------------------------------


class TestSplitSelectors:
    def test_plain_commas(self):
        assert split_selectors(".a, .b ,.c") == (".a", ".b", ".c")

    def test_commas_in_parentheses_are_kept(self):
        assert split_selectors(".a, .b:is(.c, .d)") == (".a", ".b:is(.c, .d)")

    def test_commas_in_attribute_values_are_kept(self):
        assert split_selectors('a[title="x, y"], .b') == ('a[title="x, y"]', ".b")

    def test_empty_entries_dropped(self):
        assert split_selectors(".a,,") == (".a",)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_block(self):
        with pytest.raises(StylesheetParseError):
            parse_stylesheet(".foo { color: red; ")

    def test_stray_closing_brace_position(self):
        with pytest.raises(StylesheetParseError) as info:
            parse_stylesheet(".a { } }")
        assert info.value.line == 1
        assert info.value.column == 8

    def test_message_without_source(self):
        with pytest.raises(StylesheetParseError) as info:
            parse_stylesheet(".a { } }")
        assert str(info.value).startswith("1:8: ")

    def test_message_without_position(self):
        assert str(StylesheetParseError("bad input")) == "bad input"

    def test_selector_without_block(self):
        with pytest.raises(StylesheetParseError):
            parse_stylesheet(".a")

    def test_unterminated_comment(self):
        with pytest.raises(StylesheetParseError):
            parse_stylesheet(".a { } /* never closed")

    def test_error_line_on_later_line(self):
        with pytest.raises(StylesheetParseError) as info:
            parse_stylesheet(".a { }\n.b { }\n}")
        assert info.value.line == 3


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


class TestAggregateStylesheets:
    def test_concatenates_in_order(self):
        ss = aggregate_stylesheets(
            [Source("a.css", ".a { }"), Source("b.css", ".b { }")]
        )
        assert [r.selectors for r in ss.rules] == [(".a",), (".b",)]

    def test_custom_separator(self):
        ss = aggregate_stylesheets(
            [Source("a.css", ".a { }"), Source("b.css", ".b { }")],
            separator=";",
        )
        assert len(ss.rules) == 2

    def test_no_sources(self):
        assert aggregate_stylesheets([]).rules == ()

    def test_error_attributed_to_source(self):
        sources = [
            Source("a.css", ".a { color: red; }"),
            Source("b.css", ".b { color: blue;\n}\n}"),
        ]
        with pytest.raises(StylesheetParseError) as info:
            aggregate_stylesheets(sources)
        assert info.value.source == "b.css"
        assert info.value.line == 3
        assert "b.css:3" in str(info.value)

    def test_error_column_relative_to_source_on_shared_line(self):
        sources = [Source("a.css", ".a{}"), Source("b.css", "}")]
        with pytest.raises(StylesheetParseError) as info:
            aggregate_stylesheets(sources, separator=" ")
        assert info.value.source == "b.css"
        assert info.value.line == 1
        assert info.value.column == 1
