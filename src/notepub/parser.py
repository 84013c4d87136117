"""YAML-frontmatter parser for notes and folder metadata files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from notepub.note import Note

logger = logging.getLogger(__name__)

# YAML front-matter block
_FRONTMATTER_RE = re.compile(r"^---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|$)", re.DOTALL)


def _clean_value(value: Any) -> Any:
    # YAML turns a bare "- " list item into None; drop those and blank strings
    if isinstance(value, list):
        cleaned = []
        for item in value:
            if isinstance(item, str):
                item = item.strip()
                if not item:
                    continue
            elif item is None:
                continue
            cleaned.append(item)
        return cleaned
    return value


def load_metadata(raw: str) -> dict[str, Any]:
    """Parse a YAML mapping; anything that is not a mapping yields ``{}``."""
    try:
        meta = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        logger.debug("Ignoring invalid YAML metadata: %s", exc)
        return {}
    if not isinstance(meta, dict):
        return {}
    return {str(k): _clean_value(v) for k, v in meta.items()}


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split YAML front-matter from body text.

    Returns ``(metadata_dict, body)``; ``metadata_dict`` is empty when there
    is no front-matter block or when the block is not valid YAML.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}, content
    return load_metadata(match.group(1) or ""), content[match.end() :]


def extract_title(file_name: str, metadata: dict[str, Any]) -> str:
    """Front-matter ``title`` if it is a non-empty string, else the file stem."""
    title = metadata.get("title")
    if isinstance(title, str) and title:
        return title
    return file_name.removesuffix(".md")


def parse_folder_metadata(path: Path) -> dict[str, Any] | None:
    """Read a folder metadata file; ``---`` fences around the YAML are optional."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read folder metadata %s: %s", path, exc)
        return None
    meta, body = parse_frontmatter(content)
    if meta:
        return meta
    return load_metadata(body)


def parse_note(path: Path, rel_dir: str = "") -> Note | None:
    """Read a ``.md`` file and return a :class:`Note` with its slug built.

    *rel_dir* is the folder of *path* relative to the vault root; it becomes
    the prefix of the note's slug.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable note %s: %s", path, exc)
        return None

    metadata, body = parse_frontmatter(content)
    rel_path = f"{rel_dir.strip('/')}/{path.name}".lstrip("/")

    note = Note(
        title=extract_title(path.name, metadata),
        slug=rel_path,
        content=body,
        metadata=metadata,
        path=rel_path,
    )
    note.build_slug()
    return note
