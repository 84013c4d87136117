"""Core Note dataclass: slug building and publish-visibility resolution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from notepub.slug import SlugifyOptions, slugify

#: Front-matter / folder-metadata key that controls visibility
PUBLISH_KEY = "publish"

# Case is kept; build_slug strips ".md" itself, and only from an explicit slug
_BUILD_OPTIONS = SlugifyOptions(
    preserve_slashes=True,
    url_encode=True,
    trim_slashes=True,
    preserve_case=True,
)


def metadata_bool(metadata: Mapping[str, Any] | None, key: str) -> bool | None:
    """Return ``metadata[key]`` if it is a real ``bool``, else ``None``.

    Strings such as ``"true"`` or integers are treated as absent, not coerced.
    """
    if not isinstance(metadata, Mapping):
        return None
    value = metadata.get(key)
    return value if isinstance(value, bool) else None


@dataclass
class Note:
    """A single markdown note as seen by the publisher."""

    #: May contain spaces and slashes, e.g. ``"articles/Hello World"``
    title: str = ""
    #: URL-safe path, e.g. ``"articles/Hello-World"``
    slug: str = ""
    content: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    is_public: bool = False
    #: Source path relative to the vault root
    path: str = ""

    def build_slug(self) -> None:
        """Normalise :attr:`slug` in place, deriving it from the title if empty."""
        slug = self.slug.removesuffix(".md")
        if not slug:
            slug = self.title
        self.slug = slugify(slug, _BUILD_OPTIONS)

    def folder_path(self) -> str:
        """Parent path of the slug, or ``""`` for a root-level note."""
        folder, sep, _ = self.slug.strip("/").rpartition("/")
        return folder if sep else ""

    def determine_is_public(self, folder_metadata: Mapping[str, Mapping[str, Any]]) -> None:
        """Set :attr:`is_public` from note metadata, then folder metadata.

        Only the immediate parent folder is looked up, by exact path.
        """
        publish = metadata_bool(self.metadata, PUBLISH_KEY)
        if publish is None:
            folder = self.folder_path()
            if folder:
                publish = metadata_bool(folder_metadata.get(folder), PUBLISH_KEY)
        self.is_public = bool(publish)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
