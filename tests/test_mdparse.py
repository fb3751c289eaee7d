import pytest

from ajisai.mdparse import (
    FrontMatterError,
    ParsedMarkdown,
    extract_h1_heading,
    parse_markdown_with_metadata,
)


@pytest.mark.parametrize(
    ("source", "expected_meta", "expected_content"),
    [
        (
            b"---\ntitle: Test Title\ndescription: Test Description\nversion: 1\n---\n"
            b"# Test Content\n\nThis is test content.",
            {"title": "Test Title", "description": "Test Description", "version": 1},
            "# Test Content\n\nThis is test content.",
        ),
        (b"---\n---\nContent only", {}, "Content only"),
        (b"# No Frontmatter\nJust content", {}, "# No Frontmatter\nJust content"),
    ],
    ids=["with-metadata", "empty-metadata", "no-frontmatter"],
)
def test_parse_markdown_with_metadata(source, expected_meta, expected_content):
    result = parse_markdown_with_metadata(source)
    assert result == ParsedMarkdown(front_matter=expected_meta, content=expected_content)


def test_parse_invalid_frontmatter():
    with pytest.raises(FrontMatterError):
        parse_markdown_with_metadata(b'---\ntitle: "Unclosed quote\n---\nContent')


def test_parse_accepts_text():
    result = parse_markdown_with_metadata("---\ntitle: Original Title\n---\nContent")
    assert result.front_matter == {"title": "Original Title"}
    assert result.content == "Content"


def test_metadata_mutation_does_not_affect_source():
    content = b"---\ntitle: Original Title\n---\nContent"
    result = parse_markdown_with_metadata(content)
    assert result.front_matter["title"] == "Original Title"

    result.front_matter["title"] = "Modified Title"

    second = parse_markdown_with_metadata(content)
    assert second.front_matter["title"] == "Original Title"


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("# Simple Heading\nThis is content.", "Simple Heading"),
        (
            "# Complex Heading with Multiple Words\n## This is h2\nSome content here.",
            "Complex Heading with Multiple Words",
        ),
        ("## This is h2\n### This is h3\nContent without h1.", ""),
        ("# First Heading\nSome content.\n# Second Heading\nMore content.", "First Heading"),
        ("---\ntitle: Test\n---\n# Heading from Content\nContent here.", "Heading from Content"),
        ("", ""),
        ("   \n\t  \n  ", ""),
        ("# Heading with **bold** and *italic*\nContent here.", "Heading with bold and italic"),
    ],
    ids=[
        "simple",
        "complex",
        "no-h1",
        "multiple-h1",
        "frontmatter",
        "empty",
        "whitespace",
        "inline-formatting",
    ],
)
def test_extract_h1_heading(source, expected):
    assert extract_h1_heading(source) == expected