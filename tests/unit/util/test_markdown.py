"""Unit tests for the Markdown renderer."""

from board.util.markdown import (
    escape_html,
    excerpt_from_markdown,
    format_inline,
    render_markdown,
)

LINK_ATTRS = 'rel="nofollow noreferrer noopener" target="_blank"'


class TestEscaping:
    """HTML-significant characters never reach the output raw."""

    def test_escapes_all_significant_characters(self):
        """&, <, >, " and ' become entities."""
        assert escape_html("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#39;&amp;&#39;&lt;/a&gt;"
        )

    def test_script_tag_in_paragraph_is_inert(self):
        """Raw markup in a paragraph is escaped."""
        html = render_markdown("<script>alert('hi')</script>")

        assert html == "<p>&lt;script&gt;alert(&#39;hi&#39;)&lt;/script&gt;</p>"
        assert "<script>" not in html

    def test_escapes_inside_every_block_kind(self):
        """Headings, list items and quotes escape their content too."""
        html = render_markdown("# <h>\n- <li>\n\n> <q>")

        assert "<h1>&lt;h&gt;</h1>" in html
        assert "<li>&lt;li&gt;</li>" in html
        assert "<blockquote>&lt;q&gt;</blockquote>" in html

    def test_escaped_text_is_not_unescaped(self):
        """Already-escaped entities are escaped again, not interpreted."""
        assert render_markdown("&lt;b&gt;") == "<p>&amp;lt;b&amp;gt;</p>"

    def test_plain_text_round_trip(self):
        """Plain text renders as a single escaped paragraph."""
        assert render_markdown("Just some words.") == "<p>Just some words.</p>"


class TestBlocks:
    """Line-level constructs."""

    def test_headings_of_every_level(self):
        """One to six hashes give h1..h6."""
        for level in range(1, 7):
            html = render_markdown("#" * level + " Title")
            assert html == f"<h{level}>Title</h{level}>"

    def test_seven_hashes_is_paragraph(self):
        """More than six hashes is not a heading."""
        assert render_markdown("####### Title") == "<p>####### Title</p>"

    def test_marker_without_whitespace_is_paragraph(self):
        """Heading, list and quote markers need a following space."""
        assert render_markdown("#Title") == "<p>#Title</p>"
        assert render_markdown("-item") == "<p>-item</p>"
        assert render_markdown(">quote") == "<p>&gt;quote</p>"

    def test_consecutive_list_items_share_one_list(self):
        """Items with any of the three markers stay in one list."""
        html = render_markdown("- one\n* two\n+ three")

        assert html == "<ul>\n<li>one</li>\n<li>two</li>\n<li>three</li>\n</ul>"

    def test_list_closed_by_blank_line(self):
        """A blank line closes the list."""
        html = render_markdown("- one\n\n- two")

        assert html == "<ul>\n<li>one</li>\n</ul>\n<ul>\n<li>two</li>\n</ul>"

    def test_list_closed_by_paragraph_line(self):
        """A paragraph line after a list closes it."""
        html = render_markdown("- one\nafter")

        assert html == "<ul>\n<li>one</li>\n</ul>\n<p>after</p>"

    def test_list_flushes_pending_paragraph(self):
        """A list right after paragraph text flushes the paragraph first."""
        html = render_markdown("intro\n- one")

        assert html == "<p>intro</p>\n<ul>\n<li>one</li>\n</ul>"

    def test_list_closed_at_end_of_input(self):
        """An open list is closed at the end."""
        assert render_markdown("- only").endswith("</ul>")

    def test_blockquote_is_single_line(self):
        """Each quote line is its own blockquote."""
        html = render_markdown("> one\n> two")

        assert html == "<blockquote>one</blockquote>\n<blockquote>two</blockquote>"

    def test_paragraph_lines_joined_with_space(self):
        """Lines of one paragraph are trimmed and joined with single spaces."""
        html = render_markdown("  first line  \nsecond line\n\nnext")

        assert html == "<p>first line second line</p>\n<p>next</p>"

    def test_line_endings_normalized(self):
        """CRLF and CR behave like LF."""
        assert render_markdown("a\r\nb\rc\n\nd") == "<p>a b c</p>\n<p>d</p>"

    def test_empty_input(self):
        """Nothing in, nothing out."""
        assert render_markdown("") == ""
        assert render_markdown("\n  \n") == ""


class TestFencedCode:
    """Fenced code blocks."""

    def test_code_block_content_is_literal(self):
        """Markdown inside a fence is escaped but never formatted."""
        html = render_markdown("```\n**bold** <b>\n# not heading\n```")

        assert html == "<pre><code>**bold** &lt;b&gt;\n# not heading</code></pre>"

    def test_language_tag_ignored(self):
        """A trailing language tag on the fence is dropped."""
        html = render_markdown("```python\nprint(1)\n```")

        assert html == "<pre><code>print(1)</code></pre>"

    def test_scan_continues_after_closing_fence(self):
        """Text after the closing fence is rendered normally."""
        html = render_markdown("before\n```\ncode\n```\n*after*")

        assert html == (
            "<p>before</p>\n<pre><code>code</code></pre>\n<p><em>after</em></p>"
        )

    def test_unterminated_fence_consumes_rest(self):
        """Without a closing fence the rest of the document is code."""
        html = render_markdown("```\nline one\n\n# still code")

        assert html == "<pre><code>line one\n\n# still code</code></pre>"

    def test_fence_closes_open_list(self):
        """A fence closes an open list."""
        html = render_markdown("- item\n```\nx\n```")

        assert html == "<ul>\n<li>item</li>\n</ul>\n<pre><code>x</code></pre>"


class TestInline:
    """Inline formatting."""

    def test_strong_both_forms(self):
        assert format_inline("**a** and __b__") == (
            "<strong>a</strong> and <strong>b</strong>"
        )

    def test_emphasis_both_forms(self):
        assert format_inline("*a* and _b_") == "<em>a</em> and <em>b</em>"

    def test_strong_not_read_as_two_emphasis(self):
        """Strong is substituted first."""
        assert format_inline("**bold**") == "<strong>bold</strong>"

    def test_strikethrough(self):
        assert format_inline("~~gone~~") == "<del>gone</del>"

    def test_inline_code_is_literal(self):
        """No formatting inside code spans."""
        assert format_inline("`**x** _y_`") == "<code>**x** _y_</code>"

    def test_link_with_safe_attributes(self):
        """Links open in a new tab without referrer or follow."""
        html = render_markdown("[site](https://example.com/a_b_c)")

        assert html == (
            f'<p><a href="https://example.com/a_b_c" {LINK_ATTRS}>site</a></p>'
        )

    def test_link_text_is_formatted(self):
        html = format_inline("[**bold**](/posts)")

        assert html == f'<a href="/posts" {LINK_ATTRS}><strong>bold</strong></a>'

    def test_unsafe_scheme_renders_text_only(self):
        """javascript: links degrade to their text."""
        html = render_markdown("[click](javascript:alert(1))")

        assert "href" not in html
        assert html == "<p>click</p>"

    def test_url_keeps_balanced_parentheses(self):
        html = render_markdown("[w](http://a/foo_(bar)) after")

        assert html == (
            f'<p><a href="http://a/foo_(bar)" {LINK_ATTRS}>w</a> after</p>'
        )

    def test_adjacent_links_stay_separate(self):
        html = format_inline("[a](/x) and [b](/y)")

        assert html == (
            f'<a href="/x" {LINK_ATTRS}>a</a> and <a href="/y" {LINK_ATTRS}>b</a>'
        )

    def test_link_url_cannot_break_attribute(self):
        """Quotes in the URL are escaped before the anchor is built."""
        html = render_markdown('[x](https://e.com/" onmouseover="y)')

        assert 'onmouseover="' not in html
        assert "&quot;" in html

    def test_nul_characters_cannot_forge_placeholders(self):
        """NUL in the input is replaced, never treated as a placeholder."""
        html = render_markdown("`code` \x000\x00")

        assert html == "<p><code>code</code> \ufffd0\ufffd</p>"


class TestExcerpt:
    """Plain-text excerpts for listings."""

    def test_strips_markdown_syntax(self):
        excerpt = excerpt_from_markdown("# Hello\n\n**bold** and [link](https://x.y)")

        assert excerpt == "Hello bold and link"

    def test_link_with_parentheses_keeps_only_text(self):
        excerpt = excerpt_from_markdown("see [docs](http://a/foo_(bar)) now")

        assert excerpt == "see docs now"

    def test_drops_code(self):
        excerpt = excerpt_from_markdown("before\n```\nsecret()\n```\nafter `x`")

        assert excerpt == "before after"

    def test_truncates_with_ellipsis(self):
        excerpt = excerpt_from_markdown("word " * 100, max_length=20)

        assert len(excerpt) <= 20
        assert excerpt.endswith("…")

    def test_short_text_untouched(self):
        assert excerpt_from_markdown("short", max_length=20) == "short"
