"""Editor document model."""
import threading
from typing import List
from bs4 import BeautifulSoup, NavigableString, Tag

BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "dd", "details", "div", "dl",
    "dt", "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section", "summary",
    "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
}
SKIPPED_TAGS = {"script", "style", "template", "head"}


def _flush(blocks: List[str], buffer: List[str]) -> None:
    text = "".join(buffer).strip()
    if text:
        blocks.append(text)
    buffer.clear()


def _collect_blocks(node: Tag, blocks: List[str], buffer: List[str]) -> None:
    """Walk the tree, splitting text at every block-level element boundary."""
    for child in node.children:
        if isinstance(child, NavigableString):
            # Comments, doctypes and CDATA are NavigableString subclasses
            if type(child) is NavigableString:
                buffer.append(str(child))
        elif child.name in SKIPPED_TAGS:
            continue
        elif child.name in BLOCK_TAGS:
            _flush(blocks, buffer)
            _collect_blocks(child, blocks, buffer)
            _flush(blocks, buffer)
        else:
            _collect_blocks(child, blocks, buffer)


class EditorDocument:
    """
    Holds the editor's current content as markup.

    Acts as the document source (plain text, word count) and the document
    sink (wholesale content replacement) for the processing pipeline.
    """

    def __init__(self, content: str = ""):
        self._content = content
        self._lock = threading.Lock()

    def get_content(self) -> str:
        with self._lock:
            return self._content

    def set_content(self, markup: str) -> None:
        """Replace the document content wholesale (no merge, no append)."""
        with self._lock:
            self._content = markup

    def get_plain_text(self) -> str:
        """
        Extract plain text from the markup.

        Every block-level element, at any nesting depth, starts and ends a
        block; blocks are separated by a blank line and <br> becomes a
        newline, so paragraph structure survives a round trip through the
        plain-text formatter.
        """
        content = self.get_content()
        if not content.strip():
            return ""

        soup = BeautifulSoup(content, "html5lib")  # Most forgiving parser
        for br in soup.find_all("br"):
            br.replace_with("\n")

        blocks: List[str] = []
        buffer: List[str] = []
        _collect_blocks(soup.body, blocks, buffer)
        _flush(blocks, buffer)

        return "\n\n".join(blocks)

    def get_word_count(self) -> int:
        """Count non-empty whitespace-delimited tokens in the plain text."""
        return len(self.get_plain_text().split())
