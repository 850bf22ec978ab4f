"""Page Resolver — maps a context identifier to a help article on disk.

A context identifier such as ``bet-slip/empty`` becomes the file stem
``bet-slip-empty``.  The content root is scanned once at startup into a
ContentIndex, so requests never touch the directory listing.

Two interchangeable resolvers share the lookup:

  MarkdownPageResolver: ``*.md`` files, converted to HTML on read.
  HtmlPageResolver: ``*.html`` files, served as pre-rendered HTML.
"""

import asyncio
import logging
from pathlib import Path

from assistant.errors import ConfigurationError
from assistant.models import Article
from assistant.services.markdown import html_title, markdown_title, markdown_to_html

log = logging.getLogger(__name__)


def context_key(context_id):
    """Return the file stem for *context_id*, or None if it is blank."""
    if context_id is None or not context_id.strip():
        return None
    return context_id.replace("/", "-")


class ContentIndex:
    """Read-only map of file stem → path for one content root."""

    def __init__(self, root, extension):
        self._root = Path(root)
        self._extension = extension.lower()
        self._paths = {}

        self._scan()

    @property
    def root(self):
        return self._root

    def _scan(self):
        """Build the stem → path map.  First file by name wins on a tie."""
        paths = {}
        if not self._root.is_dir():
            log.warning("Content root %s does not exist; no articles available.", self._root)
        else:
            for path in sorted(self._root.iterdir(), key=lambda p: p.name):
                if path.is_file() and path.suffix.lower() == self._extension:
                    paths.setdefault(path.stem, path)
            log.info("Content index built: %d article(s) in %s.", len(paths), self._root)
        self._paths = paths

    def reload(self):
        """Re-scan the content root from disk; the new map replaces the old in one step."""
        self._scan()

    def lookup(self, key):
        return self._paths.get(key)

    def keys(self):
        return sorted(self._paths)

    def __len__(self):
        return len(self._paths)


class PageResolver:
    """Base resolver: index lookup plus an off-loop file read."""

    extension = None

    def __init__(self, content_dir):
        self.index = ContentIndex(content_dir, self.extension)

    async def resolve(self, context_id):
        """Return the Article for *context_id*, or None if nothing (or an empty file) matches.

        Raises:
            OSError: if a matching file exists but cannot be read.
        """
        key = context_key(context_id)
        if key is None:
            return None

        path = self.index.lookup(key)
        if path is None:
            return None

        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            log.warning("Indexed article %s disappeared from disk.", path)
            return None

        article = self.render(text, path)
        if not article.content.strip():
            log.warning("Article %s has no content; treating as not found.", path)
            return None
        return article

    def render(self, text, path):
        raise NotImplementedError


class MarkdownPageResolver(PageResolver):
    extension = ".md"

    def render(self, text, path):
        title = markdown_title(text) or path.stem
        return Article(title=title, content=markdown_to_html(text))


class HtmlPageResolver(PageResolver):
    extension = ".html"

    def render(self, text, path):
        title = html_title(text) or path.stem
        return Article(title=title, content=text)


RESOLVERS = {
    "markdown": MarkdownPageResolver,
    "html": HtmlPageResolver,
}


def build_page_resolver(content_format, content_dir):
    """Create the resolver configured by ASSISTANT_CONTENT_FORMAT."""
    try:
        resolver_cls = RESOLVERS[content_format.lower()]
    except (AttributeError, KeyError):
        raise ConfigurationError(
            f"Unknown content format {content_format!r}; "
            f"expected one of {sorted(RESOLVERS)}."
        ) from None
    return resolver_cls(content_dir)
