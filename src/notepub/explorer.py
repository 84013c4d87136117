"""VaultExplorer: walk a notes directory and build publishable notes."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from notepub.config import PublishConfig
from notepub.note import Note
from notepub.parser import parse_folder_metadata, parse_note

logger = logging.getLogger(__name__)

#: Files with this suffix hold the metadata of the folder they sit in
FOLDER_METADATA_SUFFIX = ".notepub"


class VaultExplorer:
    """Collects every markdown note under *base_path*, folder by folder.

    Each folder may carry a ``*.notepub`` file whose YAML (e.g.
    ``publish: true``) applies to the notes directly inside it.
    """

    def __init__(self, base_path: Path) -> None:
        self.base_path = Path(base_path)

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def explore(self) -> list[Note]:
        """Return all notes in the vault with slugs and visibility resolved."""
        if not self.base_path.is_dir():
            raise FileNotFoundError(f"Vault directory not found: {self.base_path}")
        return self.folder_notes("")

    def folder_notes(self, rel_dir: str = "") -> list[Note]:
        if self.should_skip(rel_dir):
            return []

        directory = self.base_path / rel_dir.strip("/")
        entries = sorted(directory.iterdir())
        folder_metadata = self.collect_folder_metadata(rel_dir, entries)

        notes: list[Note] = []
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                try:
                    notes.extend(self.folder_notes(f"{rel_dir}/{entry.name}"))
                except OSError as exc:
                    logger.warning("Skipping folder %s: %s", entry, exc)
            elif entry.suffix == ".md":
                note = parse_note(entry, rel_dir)
                if note is not None:
                    note.determine_is_public(folder_metadata)
                    notes.append(note)

        logger.info("%d notes found in %s", len(notes), rel_dir or "/")
        return notes

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def should_skip(rel_dir: str) -> bool:
        return rel_dir.startswith("/.") or "node_modules" in rel_dir or ".git" in rel_dir

    def collect_folder_metadata(
        self, rel_dir: str, entries: Iterable[Path] | None = None
    ) -> dict[str, dict[str, Any]]:
        """Map the folder path of *rel_dir* to the metadata found in it."""
        if entries is None:
            entries = sorted((self.base_path / rel_dir.strip("/")).iterdir())

        folder_metadata: dict[str, dict[str, Any]] = {}
        for entry in entries:
            if entry.is_file() and entry.name.endswith(FOLDER_METADATA_SUFFIX):
                metadata = parse_folder_metadata(entry)
                if metadata is not None:
                    folder_metadata[rel_dir.strip("/")] = metadata
        return folder_metadata


def filter_public_notes(notes: list[Note], public_by_default: bool) -> list[Note]:
    """Drop private notes unless everything is public by default."""
    if public_by_default:
        return notes
    return [note for note in notes if note.is_public]


def load_public_notes(config: PublishConfig) -> list[Note]:
    """Explore ``config.notes_path`` and keep the notes that may be published."""
    notes = VaultExplorer(config.notes_path).explore()
    public = filter_public_notes(notes, config.public_by_default)
    logger.info("%d of %d notes are public", len(public), len(notes))
    return public


def home_slug(notes: list[Note], home_note_slug: str) -> str:
    """Slug of the home page: *home_note_slug* if such a note exists, else the
    alphabetically first slug, else ``""`` for an empty vault."""
    slugs = {note.slug for note in notes}
    if home_note_slug and home_note_slug in slugs:
        return home_note_slug
    return min(slugs, default="")
