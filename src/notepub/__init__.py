"""notepub: slugs and publish visibility for markdown notes."""

from notepub.config import ConfigError, PublishConfig, load_config
from notepub.explorer import VaultExplorer, filter_public_notes, home_slug, load_public_notes
from notepub.logging_setup import setup_logging
from notepub.note import Note, metadata_bool
from notepub.parser import parse_frontmatter, parse_note
from notepub.slug import slugify, slugify_heading, slugify_note

__all__ = [
    "ConfigError",
    "Note",
    "PublishConfig",
    "VaultExplorer",
    "filter_public_notes",
    "home_slug",
    "load_config",
    "load_public_notes",
    "metadata_bool",
    "parse_frontmatter",
    "parse_note",
    "setup_logging",
    "slugify",
    "slugify_heading",
    "slugify_note",
]
