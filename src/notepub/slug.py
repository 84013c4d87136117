"""Slug helpers for note paths and heading anchors.

Two flavours share one entry point, :func:`slugify`:

- **note slugs** keep ``/`` so a note under ``articles/`` stays path-shaped,
  and are percent-encoded for use in a URL path;
- **heading slugs** collapse everything outside ``[a-z0-9]`` into dashes and
  are meant for ``#anchor`` fragments.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

# Runs of characters that are not allowed in a heading anchor
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
# Characters a path segment may carry unescaped on top of quote()'s own set
_PATH_SAFE = "$&+:=@/"


@dataclass(frozen=True)
class SlugifyOptions:
    preserve_slashes: bool = False
    url_encode: bool = False
    remove_extension: bool = False
    trim_slashes: bool = False
    preserve_case: bool = False


DEFAULT_NOTE_OPTIONS = SlugifyOptions(
    preserve_slashes=True,
    url_encode=True,
    remove_extension=True,
    trim_slashes=True,
)
DEFAULT_HEADING_OPTIONS = SlugifyOptions()


def clean_multiple_dashes(text: str) -> str:
    """Collapse every run of consecutive dashes into a single dash."""
    result: list[str] = []
    prev_dash = False
    for char in text:
        if char == "-":
            if not prev_dash:
                result.append(char)
            prev_dash = True
        else:
            result.append(char)
            prev_dash = False
    return "".join(result)


def path_escape(text: str) -> str:
    """Percent-encode *text* as a URL path, leaving ``/`` literal.

    Unreserved characters and ``$ & + : = @`` pass through; everything else,
    including ``%`` itself and non-ASCII characters (as UTF-8), becomes
    ``%XX`` with uppercase hex.
    """
    return quote(text, safe=_PATH_SAFE)


def slugify(text: str, options: SlugifyOptions) -> str:
    """Convert *text* to a slug according to *options*."""
    if not text:
        return ""

    slug = text
    if options.remove_extension:
        slug = slug.removesuffix(".md")
    if not options.preserve_case:
        slug = slug.lower()

    if not options.preserve_slashes:
        return _NON_ALNUM_RE.sub("-", slug).strip("-")

    slug = clean_multiple_dashes(slug.replace(" ", "-"))
    if options.trim_slashes:
        slug = slug.strip("/-")
    if options.url_encode:
        slug = path_escape(slug)
    return slug


def slugify_note(text: str) -> str:
    return slugify(text, DEFAULT_NOTE_OPTIONS)


def slugify_heading(text: str) -> str:
    return slugify(text, DEFAULT_HEADING_OPTIONS)


def slugify_note_with_case_logic(text: str, existing_slug: str) -> str:
    """Slugify a note, keeping the original case only for title-derived slugs.

    An explicit *existing_slug* is lowercased; a slug built from the title
    (``existing_slug`` empty) keeps the title's capitalisation.
    """
    options = SlugifyOptions(
        preserve_slashes=True,
        url_encode=True,
        remove_extension=True,
        trim_slashes=True,
        preserve_case=existing_slug == "",
    )
    return slugify(text, options)
