"""Tests for the Markdown → HTML converter and title scanners.

Covers:
  - Headings, paragraphs and list grouping
  - List closing on blank lines, headings and paragraphs
  - HTML escaping of source text
  - Title extraction from markdown and HTML
"""

import pytest

from assistant.services.markdown import html_title, markdown_title, markdown_to_html


# ── Conversion ─────────────────────────────────────────────────────────────

def test_heading_and_paragraph():
    """Smoke: the bet-slip page converts to h1 + p."""
    html = markdown_to_html("# How to Place a Bet\n\nSelect odds and confirm.")
    assert html == "<h1>How to Place a Bet</h1>\n<p>Select odds and confirm.</p>\n"


def test_h2():
    assert markdown_to_html("## Rules") == "<h2>Rules</h2>\n"


def test_consecutive_items_share_one_list():
    """Beast: a run of '* ' lines is wrapped by exactly one <ul>."""
    html = markdown_to_html("* One\n* Two\n* Three")
    assert html == "<ul>\n<li>One</li>\n<li>Two</li>\n<li>Three</li>\n</ul>\n"
    assert html.count("<ul>") == 1
    assert html.count("</ul>") == 1


def test_blank_line_closes_list():
    html = markdown_to_html("* One\n\n* Two")
    assert html == "<ul>\n<li>One</li>\n</ul>\n<ul>\n<li>Two</li>\n</ul>\n"


@pytest.mark.parametrize("follower,expected", [
    ("# Next", "<h1>Next</h1>\n"),
    ("## Next", "<h2>Next</h2>\n"),
    ("Plain text", "<p>Plain text</p>\n"),
])
def test_non_item_line_closes_list(follower, expected):
    html = markdown_to_html(f"* Item\n{follower}")
    assert html == "<ul>\n<li>Item</li>\n</ul>\n" + expected


def test_list_closed_at_end_of_input():
    assert markdown_to_html("Intro\n* Item").endswith("<li>Item</li>\n</ul>\n")


def test_crlf_input():
    """Edge: Windows line endings convert like plain newlines."""
    assert markdown_to_html("# Title\r\n\r\nBody\r\n") == "<h1>Title</h1>\n<p>Body</p>\n"


def test_unsupported_syntax_is_a_paragraph():
    """Edge: deeper headings, emphasis and indented markers fall through to <p>."""
    html = markdown_to_html("### Small\n**bold**\n  # indented")
    assert html == "<p>### Small</p>\n<p>**bold**</p>\n<p># indented</p>\n"


def test_marker_without_space_is_a_paragraph():
    assert markdown_to_html("#Title\n*item") == "<p>#Title</p>\n<p>*item</p>\n"


def test_empty_input():
    assert markdown_to_html("") == ""
    assert markdown_to_html("\n\n  \n") == ""


# ── Escaping ───────────────────────────────────────────────────────────────

def test_special_characters_are_escaped():
    """Beast: <, > and & never pass through raw."""
    html = markdown_to_html("# Odds <b>& Evens</b>\n* <script>x</script>\nA & B > C")
    assert "<b>" not in html
    assert "<script>" not in html
    assert "<h1>Odds &lt;b&gt;&amp; Evens&lt;/b&gt;</h1>" in html
    assert "<li>&lt;script&gt;x&lt;/script&gt;</li>" in html
    assert "<p>A &amp; B &gt; C</p>" in html


# ── Titles ─────────────────────────────────────────────────────────────────

def test_markdown_title_first_h1():
    text = "Intro line\n## Sub\n# First\n# Second"
    assert markdown_title(text) == "First"


def test_markdown_title_trims():
    assert markdown_title("#    Spaced Title   \nBody") == "Spaced Title"


def test_markdown_title_missing():
    assert markdown_title("## Only a subheading\nBody") is None


def test_html_title_prefers_h1():
    doc = "<html><head><title>Page</title></head><body><H1 class='x'>Cash &amp; Out</H1></body></html>"
    assert html_title(doc) == "Cash & Out"


def test_html_title_strips_inner_tags():
    assert html_title("<h1>Live <em>Betting</em></h1>") == "Live Betting"


def test_html_title_falls_back_to_title_tag():
    assert html_title("<title>Deposits</title><p>No heading</p>") == "Deposits"


def test_html_title_missing():
    assert html_title("<p>Nothing here</p>") is None
