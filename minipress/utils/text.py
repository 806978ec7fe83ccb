"""Slug and excerpt helpers for posts."""

import re
import unicodedata

from minipress.constants import EXCERPT_WORD_COUNT, SLUG_MAX_LENGTH


def slugify(title: str) -> str:
    """Turn a title into a lowercase, hyphen-separated URL slug.

    Accented letters are folded to ASCII; everything else that is not a
    letter or digit becomes a separator.

    >>> slugify("Hello, World!")
    'hello-world'
    >>> slugify("Crème brûlée recipes")
    'creme-brulee-recipes'
    """
    normalized = unicodedata.normalize("NFKD", title)
    ascii_title = normalized.encode("ascii", "ignore").decode("ascii").lower()
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_title).strip("-")
    return slug[:SLUG_MAX_LENGTH].rstrip("-")


def make_excerpt(content: str, word_count: int = EXCERPT_WORD_COUNT) -> str:
    """First ``word_count`` words of content joined by single spaces.

    Content shorter than that is returned unchanged.
    """
    words = content.split()
    if len(words) < word_count:
        return content
    return " ".join(words[:word_count])
