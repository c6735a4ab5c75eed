"""Markdown rendering utilities.

A small, line-oriented renderer for the Markdown subset the board accepts:
headings, unordered lists, single-line blockquotes, fenced code blocks,
paragraphs, and inline strong/emphasis/code/strikethrough/links.

All text is HTML-escaped before any inline marker is substituted, so the
output can be inserted into a page verbatim.
"""

import re
from html import escape

HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")
LIST_ITEM_RE = re.compile(r"^[-*+]\s+")
BLOCKQUOTE_RE = re.compile(r"^>\s+")
FENCE_RE = re.compile(r"^```")

CODE_SPAN_RE = re.compile(r"`([^`]+)`")
# One level of balanced parentheses is allowed inside the URL
LINK_RE = re.compile(r"\[(.+?)\]\(((?:[^()]|\([^()]*\))+)\)")
STRONG_STAR_RE = re.compile(r"\*\*(.+?)\*\*")
STRONG_UNDERSCORE_RE = re.compile(r"__(.+?)__")
EM_STAR_RE = re.compile(r"(?<!\*)\*(?!\s)(.+?)(?<!\s)\*(?!\*)")
EM_UNDERSCORE_RE = re.compile(r"_(.+?)_")
STRIKE_RE = re.compile(r"~~(.+?)~~")
PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")

SAFE_URL_RE = re.compile(r"^(?:https?:|mailto:|/|#)", re.IGNORECASE)
LINK_ATTRIBUTES = 'rel="nofollow noreferrer noopener" target="_blank"'


def escape_html(value: str) -> str:
    """Escape &, <, >, " and ' as HTML entities."""
    return escape(value, quote=True).replace("&#x27;", "&#39;")


def _link(match: re.Match, keep) -> str:
    text, url = match.group(1), match.group(2)
    if "\x00" in url:
        return match.group(0)
    if not SAFE_URL_RE.match(url):
        return text
    # The URL is already escaped, so quotes cannot break out of the attribute
    return keep(f'<a href="{url}" {LINK_ATTRIBUTES}>') + text + keep("</a>")


def format_inline(text: str) -> str:
    """Apply inline formatting to already-escaped text.

    Code spans and link markup are set aside before the emphasis passes, so
    code stays literal and URLs are never rewritten.
    """
    stash: list[str] = []

    def keep(value: str) -> str:
        stash.append(value)
        return f"\x00{len(stash) - 1}\x00"

    text = CODE_SPAN_RE.sub(lambda match: keep(f"<code>{match.group(1)}</code>"), text)
    text = LINK_RE.sub(lambda match: _link(match, keep), text)

    # Strong before emphasis so ** and __ are never read as two single markers
    text = STRONG_STAR_RE.sub(r"<strong>\1</strong>", text)
    text = STRONG_UNDERSCORE_RE.sub(r"<strong>\1</strong>", text)
    text = EM_STAR_RE.sub(r"<em>\1</em>", text)
    text = EM_UNDERSCORE_RE.sub(r"<em>\1</em>", text)
    text = STRIKE_RE.sub(r"<del>\1</del>", text)

    return PLACEHOLDER_RE.sub(lambda match: stash[int(match.group(1))], text)


def _split_lines(markdown: str) -> list[str]:
    # NUL is reserved for inline placeholders
    markdown = markdown.replace("\x00", "\ufffd")
    return re.sub(r"\r\n?", "\n", markdown).split("\n")


def render_markdown(markdown: str) -> str:
    """Convert Markdown to sanitized HTML.

    Never fails: anything that is not a recognized construct becomes
    paragraph text.

    Args:
        markdown: Untrusted Markdown source

    Returns:
        HTML blocks joined by newlines
    """
    lines = _split_lines(markdown)
    html: list[str] = []
    in_list = False
    paragraph: list[str] = []

    def close_list() -> None:
        nonlocal in_list
        if in_list:
            html.append("</ul>")
            in_list = False

    def flush_paragraph() -> None:
        if paragraph:
            text = escape_html(" ".join(paragraph).strip())
            html.append(f"<p>{format_inline(text)}</p>")
            paragraph.clear()

    index = 0
    while index < len(lines):
        line = lines[index].rstrip()
        index += 1

        if not line.strip():
            close_list()
            flush_paragraph()
            continue

        heading = HEADING_RE.match(line)
        if heading:
            close_list()
            flush_paragraph()
            level = len(heading.group(1))
            content = escape_html(heading.group(2).strip())
            html.append(f"<h{level}>{format_inline(content)}</h{level}>")
            continue

        if LIST_ITEM_RE.match(line):
            if not in_list:
                flush_paragraph()
                html.append("<ul>")
                in_list = True
            content = escape_html(LIST_ITEM_RE.sub("", line, count=1))
            html.append(f"<li>{format_inline(content)}</li>")
            continue

        if BLOCKQUOTE_RE.match(line):
            close_list()
            flush_paragraph()
            content = escape_html(BLOCKQUOTE_RE.sub("", line, count=1))
            html.append(f"<blockquote>{format_inline(content)}</blockquote>")
            continue

        if FENCE_RE.match(line):
            close_list()
            flush_paragraph()
            code_lines: list[str] = []
            while index < len(lines) and not FENCE_RE.match(lines[index].strip()):
                code_lines.append(lines[index])
                index += 1
            # Step past the closing fence (no-op at end of input)
            index += 1
            code = escape_html("\n".join(code_lines))
            html.append(f"<pre><code>{code}</code></pre>")
            continue

        close_list()
        paragraph.append(line.strip())

    close_list()
    flush_paragraph()

    return "\n".join(html)


def excerpt_from_markdown(markdown: str, max_length: int = 180) -> str:
    """Build a plain-text excerpt for listings.

    Args:
        markdown: Markdown source
        max_length: Maximum excerpt length, ellipsis included

    Returns:
        Plain text, truncated with an ellipsis when longer than max_length
    """
    plain = re.sub(r"```[\s\S]*?```", " ", markdown)
    plain = re.sub(r"`[^`]*`", " ", plain)
    plain = LINK_RE.sub(r"\1", plain)
    plain = re.sub(r"[#>*_~`\-]+", " ", plain)
    plain = re.sub(r"\s+", " ", plain).strip()

    if len(plain) <= max_length:
        return plain

    return plain[: max_length - 1].rstrip() + "…"
