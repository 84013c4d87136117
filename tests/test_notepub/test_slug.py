"""Unit tests for notepub.slug."""

import pytest

from notepub.slug import (
    DEFAULT_HEADING_OPTIONS,
    DEFAULT_NOTE_OPTIONS,
    SlugifyOptions,
    clean_multiple_dashes,
    path_escape,
    slugify,
    slugify_heading,
    slugify_note,
    slugify_note_with_case_logic,
)

# ---------------------------------------------------------------------------
# slugify_note
# ---------------------------------------------------------------------------


class TestSlugifyNote:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", ""),
            ("Hello World", "hello-world"),
            ("hello-world.md", "hello-world"),
            ("folder/hello world.md", "folder/hello-world"),
            ("hello---world--test", "hello-world-test"),
            ("/-hello-world-/", "hello-world"),
            ("Articles/Hello World & More", "articles/hello-world-&-more"),
            ("Deep/Nested/Path Structure", "deep/nested/path-structure"),
            ("!@#$%^&*()", "%21@%23$%25%5E&%2A%28%29"),
        ],
    )
    def test_examples(self, text: str, expected: str):
        assert slugify_note(text) == expected

    def test_matches_explicit_options(self):
        assert slugify("Some Title", DEFAULT_NOTE_OPTIONS) == slugify_note("Some Title")


# ---------------------------------------------------------------------------
# slugify_heading
# ---------------------------------------------------------------------------


class TestSlugifyHeading:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", ""),
            ("Hello World", "hello-world"),
            ("Hello, World!", "hello-world"),
            ("Chapter 1: Introduction", "chapter-1-introduction"),
            ("API & SDK Guide", "api-sdk-guide"),
            ("Multiple   Spaces   Here", "multiple-spaces-here"),
            ("  Trimmed Text  ", "trimmed-text"),
            ("!@#$%^&*()", ""),
            ("Some_Mixed_Case_Text", "some-mixed-case-text"),
        ],
    )
    def test_examples(self, text: str, expected: str):
        assert slugify_heading(text) == expected

    def test_slashes_not_preserved(self):
        assert slugify_heading("a/b") == "a-b"


# ---------------------------------------------------------------------------
# slugify options
# ---------------------------------------------------------------------------


class TestSlugifyOptions:
    def test_default_note_options(self):
        assert DEFAULT_NOTE_OPTIONS == SlugifyOptions(
            preserve_slashes=True,
            url_encode=True,
            remove_extension=True,
            trim_slashes=True,
        )

    def test_default_heading_options(self):
        assert DEFAULT_HEADING_OPTIONS == SlugifyOptions()

    def test_preserve_case(self):
        opts = SlugifyOptions(preserve_slashes=True, preserve_case=True)
        assert slugify("Hello World", opts) == "Hello-World"

    def test_without_trim_keeps_edges(self):
        opts = SlugifyOptions(preserve_slashes=True)
        assert slugify("/a b/", opts) == "/a-b/"

    def test_without_url_encode(self):
        opts = SlugifyOptions(preserve_slashes=True, trim_slashes=True)
        assert slugify("what?", opts) == "what?"

    def test_extension_kept_unless_requested(self):
        opts = SlugifyOptions(preserve_slashes=True)
        assert slugify("note.md", opts) == "note.md"


class TestSlugifyNoteWithCaseLogic:
    @pytest.mark.parametrize(
        "text, existing_slug, expected",
        [
            ("Hello World", "", "Hello-World"),
            ("custom-slug", "custom-slug", "custom-slug"),
            ("Custom-Slug", "Custom-Slug", "custom-slug"),
            ("Articles/Hello World & More", "", "Articles/Hello-World-&-More"),
            ("Articles/Hello-World", "Articles/Hello-World", "articles/hello-world"),
            ("Hello World.md", "", "Hello-World"),
            ("hello-world.md", "hello-world.md", "hello-world"),
        ],
    )
    def test_examples(self, text: str, existing_slug: str, expected: str):
        assert slugify_note_with_case_logic(text, existing_slug) == expected


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


class TestCleanMultipleDashes:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hello world", "hello world"),
            ("hello-world", "hello-world"),
            ("hello---world", "hello-world"),
            ("hello--world---test----end", "hello-world-test-end"),
            ("---hello-world---", "-hello-world-"),
            ("-----", "-"),
            ("", ""),
            ("a", "a"),
            ("-", "-"),
        ],
    )
    def test_examples(self, text: str, expected: str):
        assert clean_multiple_dashes(text) == expected


class TestPathEscape:
    def test_slash_kept(self):
        assert path_escape("a/b") == "a/b"

    def test_sub_delims_allowed_in_segment(self):
        assert path_escape("$&+:=@") == "$&+:=@"

    def test_segment_separators_encoded(self):
        assert path_escape(";,?") == "%3B%2C%3F"

    def test_unreserved_untouched(self):
        assert path_escape("a-b_c.d~e") == "a-b_c.d~e"

    def test_uppercase_hex(self):
        assert path_escape("^") == "%5E"
