"""Tests for the tag tokenizer and the content predicates."""

import pytest

from formguard import DEFAULT_ALLOWED_TAGS, Validator, parse_allowed_tags, strip_tags, tokenize
from formguard.markup import TokenKind


class TestTokenize:
    """Tokenizer boundaries."""

    @pytest.mark.parametrize(
        "value",
        [
            "plain",
            "<p>Hello <b>World</b></p>",
            '<a href="x>y" title=\'q\'>link</a>',
            "a < b and <3",
            "<!-- note --> text <!DOCTYPE html><?xml version='1.0'?>",
            "open <b",
            "",
        ],
    )
    def test_tokens_reassemble_input(self, value):
        assert "".join(token.text for token in tokenize(value)) == value

    def test_tag_names_are_lowercased(self):
        tokens = list(tokenize("<DIV class='x'>hi</Div>"))
        assert [t.kind for t in tokens] == [TokenKind.TAG, TokenKind.TEXT, TokenKind.TAG]
        assert tokens[0].name == "div"
        assert tokens[0].closing is False
        assert tokens[2].name == "div"
        assert tokens[2].closing is True

    def test_quoted_gt_does_not_close_tag(self):
        tokens = list(tokenize('<a href="x>y">link</a>'))
        assert tokens[0].text == '<a href="x>y">'
        assert tokens[1].text == "link"

    def test_lone_angle_brackets_are_text(self):
        tokens = list(tokenize("1 < 2 <= 3 <3 x<"))
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.TEXT

    def test_comments_and_declarations(self):
        kinds = [t.kind for t in tokenize("<!-- c --><!DOCTYPE html><?php echo 1; ?>")]
        assert kinds == [TokenKind.COMMENT, TokenKind.DECLARATION, TokenKind.DECLARATION]

    def test_unterminated_tag_runs_to_end(self):
        tokens = list(tokenize("text <script src=x"))
        assert tokens[-1].kind == TokenKind.TAG
        assert tokens[-1].text == "<script src=x"

    def test_nameless_closing_tag(self):
        tokens = list(tokenize("</ >"))
        assert tokens[0].kind == TokenKind.TAG
        assert tokens[0].name is None


class TestParseAllowedTags:
    """Allow-list normalization."""

    def test_bracketed_string(self):
        assert parse_allowed_tags("<a><B><h1>") == frozenset({"a", "b", "h1"})

    def test_separated_names(self):
        assert parse_allowed_tags("p, em strong") == frozenset({"p", "em", "strong"})

    def test_iterable(self):
        assert parse_allowed_tags(["<p>", "Div", "</span>"]) == frozenset({"p", "div", "span"})

    def test_none_is_empty(self):
        assert parse_allowed_tags(None) == frozenset()

    def test_default_set(self):
        allowed = parse_allowed_tags(DEFAULT_ALLOWED_TAGS)
        assert {"a", "b", "blockquote", "br", "h1", "h6", "ul"} <= allowed
        assert "script" not in allowed
        assert len(allowed) == 23


class TestStripTags:
    """Strip everything except allow-listed tags."""

    def test_strips_all_by_default(self):
        assert strip_tags("<p>Hello <b>World</b></p>") == "Hello World"

    def test_keeps_allowed_tags_verbatim(self):
        assert strip_tags('<p class="x">Hi <i>there</i></p>', ["p"]) == '<p class="x">Hi there</p>'

    def test_comments_always_removed(self):
        assert strip_tags("a<!-- b -->c", ["p"]) == "ac"


class TestIsPlainText:
    """Any tag at all fails is_plain_text."""

    def test_plain(self, validator):
        assert validator.is_plain_text("Hello World") is True

    def test_markup(self, validator):
        assert validator.is_plain_text("<p>Hello World</p>") is False

    def test_comparison_operators_are_text(self, validator):
        assert validator.is_plain_text("if a < b && b > c") is True
        assert validator.is_plain_text("I <3 forms") is True

    def test_comment_is_markup(self, validator):
        assert validator.is_plain_text("Hello <!-- hidden --> World") is False

    def test_self_closing_tag_is_markup(self, validator):
        assert validator.is_plain_text("line<br/>break") is False


class TestIsAllowedHtml:
    """Only allow-listed tags may appear."""

    def test_default_allow_list(self, validator):
        assert validator.is_allowed_html("<p>Hello <b>World</b></p>") is True

    def test_script_rejected(self, validator):
        assert validator.is_allowed_html("<p>Hello <script>alert(1)</script></p>") is False

    def test_custom_allow_list(self, validator):
        assert validator.is_allowed_html("<p>Test</p>", "<p>") is True
        assert validator.is_allowed_html("<p><b>Test</b></p>", "<p>") is False

    def test_tag_names_case_insensitive(self, validator):
        assert validator.is_allowed_html("<P>Upper</P>") is True

    def test_attributes_preserved(self, validator):
        assert validator.is_allowed_html('<a href="https://example.com">link</a>') is True

    def test_self_closing_and_void_tags(self, validator):
        assert validator.is_allowed_html("one<br>two<br/>three<hr />") is True

    def test_headings_and_lists(self, validator):
        html = "<h1>T</h1><h6>t</h6><ul><li>a</li></ul><ol><li>b</li></ol><blockquote>q</blockquote>"
        assert validator.is_allowed_html(html) is True

    def test_unlisted_tags_rejected(self, validator):
        assert validator.is_allowed_html('<img src="x.png">') is False
        assert validator.is_allowed_html("<table><tr><td>1</td></tr></table>") is False

    def test_comment_rejected(self, validator):
        assert validator.is_allowed_html("<p>a</p><!-- b -->") is False

    def test_plain_text_is_allowed_html(self, validator):
        assert validator.is_allowed_html("just text") is True

    def test_instance_allow_list(self, settings):
        narrow = Validator(settings=settings, allowed_tags="<em>")
        assert narrow.is_allowed_html("<em>x</em>") is True
        assert narrow.is_allowed_html("<p>x</p>") is False
