"""Reassembly of processed chunks and plain-text to markup promotion."""
import re
from typing import List

from config import CHUNK_SEPARATOR

_HTML_TAG = re.compile(r"<[a-z][\s\S]*>", re.IGNORECASE)
_PARAGRAPH_BREAK = re.compile(r"\n\n+")


def join_chunks(results: List[str]) -> str:
    """Join processed chunk outputs with a blank line between them."""
    return CHUNK_SEPARATOR.join(results)


def contains_html(text: str) -> bool:
    """Check whether text already contains an HTML start tag."""
    return bool(_HTML_TAG.search(text))


def format_plain_text_to_html(text: str) -> str:
    """
    Promote plain text to paragraph markup.

    Markup is returned unchanged. Otherwise blank-line separated blocks
    become <p> elements and single newlines inside a block become <br>.
    """
    if contains_html(text):
        return text

    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(text)]
    paragraphs = [p.replace("\n", "<br>") for p in paragraphs if p]

    return "".join(f"<p>{paragraph}</p>" for paragraph in paragraphs)
