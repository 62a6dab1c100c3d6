import pytest

from md2html.parsers.frontmatter import FrontmatterResult, extract_frontmatter


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Just content",
        "# Heading\n\nBody",
        "---",
        "--- \ntitle: x\n---\n\nBody",
        "\n---\ntitle: x\n---\n\nBody",
        "---\ntitle: never closed\n\nBody",
        "Intro\n---\ntitle: x\n---\n",
    ],
)
def test_text_without_leading_block_is_returned_unchanged(text: str) -> None:
    assert extract_frontmatter(text) == FrontmatterResult(content=text, metadata=None)


def test_extracts_valid_frontmatter() -> None:
    result = extract_frontmatter("---\ntitle: Test\nauthor: John\n---\n\nContent")

    assert result.metadata == {"title": "Test", "author": "John"}
    assert result.content == "Content"


def test_empty_frontmatter_yields_none_metadata() -> None:
    result = extract_frontmatter("---\n---\n\nContent")

    assert result.metadata is None
    assert result.content == "Content"


def test_block_with_no_keys_yields_none_metadata() -> None:
    result = extract_frontmatter("---\njust words\n: no key\n---\nBody")

    assert result.metadata is None
    assert result.content == "Body"


def test_values_keep_text_after_first_colon() -> None:
    result = extract_frontmatter("---\nurl: https://example.com:8080/x\n---\n")

    assert result.metadata == {"url": "https://example.com:8080/x"}
    assert result.content == ""


def test_one_layer_of_matching_quotes_is_stripped() -> None:
    block = "---\na: \"double\"\nb: 'single'\nc: \"mismatched'\nd: \"\"nested\"\"\n---\n"
    metadata = extract_frontmatter(block).metadata

    assert metadata == {"a": "double", "b": "single", "c": "\"mismatched'", "d": '"nested"'}


def test_duplicate_keys_last_wins() -> None:
    metadata = extract_frontmatter("---\ntag: one\ntag: two\n---\n").metadata

    assert metadata == {"tag": "two"}


def test_keys_and_values_are_trimmed_and_stay_strings() -> None:
    metadata = extract_frontmatter("---\n  draft :   true  \n count: 3\n---\n").metadata

    assert metadata == {"draft": "true", "count": "3"}


def test_content_keeps_everything_after_block() -> None:
    body = "# Title\n\n---\n\nsecond: section\n"
    result = extract_frontmatter("---\na: b\n---\n\n\n" + body)

    assert result.content == body
    assert result.metadata == {"a": "b"}


def test_n_distinct_keys_produce_n_entries() -> None:
    keys = [f"key{i}" for i in range(7)]
    block = "---\n" + "\n".join(f"{k}: value {k}" for k in keys) + "\n---\n\nBody"

    result = extract_frontmatter(block)

    assert result.metadata is not None
    assert len(result.metadata) == len(keys)
    assert result.content == "Body"
