"""Minimal Markdown → HTML conversion and title scanning for help pages.

Only what the help articles actually use is supported:

  # Heading        → <h1>
  ## Subheading    → <h2>
  * item           → <li>, consecutive items share one <ul>
  anything else    → <p>

No inline emphasis, links, nesting or code blocks.  All text is
HTML-escaped, so markup written into a content file is shown literally.
"""

import html
import re

_H1_RE = re.compile(r"<h1\b[^>]*>(.*?)</h1\s*>", re.IGNORECASE | re.DOTALL)
_TITLE_RE = re.compile(r"<title\b[^>]*>(.*?)</title\s*>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")


def markdown_to_html(markdown):
    """Convert *markdown* to an HTML fragment, one element per line."""
    lines = markdown.replace("\r", "").split("\n")
    out = []
    in_list = False

    for raw in lines:
        line = raw.rstrip()

        if not line:
            if in_list:
                out.append("</ul>")
                in_list = False
            continue

        if line.startswith("* "):
            if not in_list:
                out.append("<ul>")
                in_list = True
            out.append(f"<li>{_escape(line[2:])}</li>")
            continue

        if in_list:
            out.append("</ul>")
            in_list = False

        if line.startswith("# "):
            out.append(f"<h1>{_escape(line[2:])}</h1>")
        elif line.startswith("## "):
            out.append(f"<h2>{_escape(line[3:])}</h2>")
        else:
            out.append(f"<p>{_escape(line)}</p>")

    if in_list:
        out.append("</ul>")

    return "".join(f"{element}\n" for element in out)


def markdown_title(markdown):
    """Return the text of the first ``# `` heading, or None."""
    for line in markdown.split("\n"):
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped[2:].strip() or None
    return None


def html_title(document):
    """Return the first <h1> text, else the <title> text, else None."""
    for pattern in (_H1_RE, _TITLE_RE):
        match = pattern.search(document)
        if match:
            text = html.unescape(_TAG_RE.sub("", match.group(1))).strip()
            if text:
                return text
    return None


def _escape(text):
    return html.escape(text.strip())
