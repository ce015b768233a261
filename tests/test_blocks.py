import pytest

from mdsitegen.blocks import (
    BlockType,
    block_to_html,
    extract_title,
    get_block_type,
    markdown_to_blocks,
    markdown_to_html_node,
    text_to_children,
)
from mdsitegen.html_node import LeafNode, ParentNode

SAMPLE = (
    "\n"
    "This is **bolded** paragraph\n"
    "\n"
    "This is another paragraph with _italic_ text and `code` here\n"
    "This is the same paragraph on a new line\n"
    "\n"
    "- This is a list\n"
    "- with items\n"
)


def test_markdown_to_blocks_sample():
    assert markdown_to_blocks(SAMPLE) == [
        "This is **bolded** paragraph",
        "This is another paragraph with _italic_ text and `code` here\n"
        "This is the same paragraph on a new line",
        "- This is a list\n- with items",
    ]


def test_markdown_to_blocks_empty():
    assert markdown_to_blocks("") == []


@pytest.mark.parametrize(
    "block, expected",
    [
        ("This is a paragraph", BlockType.PARAGRAPH),
        ("# This is a header", BlockType.HEADER),
        ("```\nThis is a code block\n```", BlockType.CODE),
        ("> This is a quote", BlockType.QUOTE),
        ("- This is a ulist", BlockType.ULIST),
        ("1. This is a olist", BlockType.OLIST),
    ],
)
def test_get_block_type(block, expected):
    assert get_block_type(block) is expected


@pytest.mark.parametrize(
    "block",
    ["> quoted\nnot quoted", "- item\nnot an item", "1. one\n3. three", "####### seven"],
)
def test_get_block_type_falls_back_to_paragraph(block):
    assert get_block_type(block) is BlockType.PARAGRAPH


@pytest.mark.parametrize(
    "block, name",
    [
        ("1. first\n2. second", "olist"),
        ("- item", "ulist"),
        ("> quote", "quote"),
        ("just text", "paragraph"),
    ],
)
def test_block_type_str(block, name):
    assert str(get_block_type(block)) == name


def test_extract_title():
    assert extract_title("\n# This is a title\n\nThis is a paragraph\n") == "This is a title"


def test_extract_title_no_content():
    with pytest.raises(ValueError):
        extract_title("")


def test_extract_title_no_header():
    with pytest.raises(ValueError):
        extract_title("\nThis is a paragraph\n")


@pytest.mark.parametrize(
    "block, expected",
    [
        (
            "This is a paragraph",
            ParentNode("p", [LeafNode("p", "This is a paragraph")]),
        ),
        (
            "# This is a header",
            ParentNode("h1", [LeafNode("p", "This is a header")]),
        ),
        (
            "```\nThis is a code block\n```",
            ParentNode(
                "pre",
                [ParentNode("code", [LeafNode("p", "This is a code block")])],
            ),
        ),
        (
            "> This is a quote\n> This is another quote",
            ParentNode(
                "blockquote",
                [LeafNode("p", "This is a quote This is another quote")],
            ),
        ),
        (
            "- This is a ulist\n- This is another ulist",
            ParentNode(
                "ul",
                [
                    ParentNode("li", [LeafNode("p", "This is a ulist")]),
                    ParentNode("li", [LeafNode("p", "This is another ulist")]),
                ],
            ),
        ),
        (
            "1. This is a olist\n2. This is another olist",
            ParentNode(
                "ol",
                [
                    ParentNode("li", [LeafNode("p", "This is a olist")]),
                    ParentNode("li", [LeafNode("p", "This is another olist")]),
                ],
            ),
        ),
    ],
)
def test_block_to_html(block, expected):
    assert block_to_html(block) == expected


def test_block_to_html_header_level():
    assert block_to_html("### Third").tag == "h3"


def test_block_to_html_header_without_text():
    with pytest.raises(ValueError):
        block_to_html("# ")


def test_block_to_html_code_with_language_is_invalid():
    with pytest.raises(ValueError):
        block_to_html("```python\nprint(1)\n```")


def test_markdown_to_html_node_sample():
    expected = ParentNode(
        "div",
        [
            ParentNode(
                "p",
                [
                    LeafNode("p", "This is "),
                    LeafNode("b", "bolded"),
                    LeafNode("p", " paragraph"),
                ],
            ),
            ParentNode(
                "p",
                [
                    LeafNode("p", "This is another paragraph with "),
                    LeafNode("i", "italic"),
                    LeafNode("p", " text and "),
                    LeafNode("code", "code"),
                    LeafNode("p", " here This is the same paragraph on a new line"),
                ],
            ),
            ParentNode(
                "ul",
                [
                    ParentNode("li", [LeafNode("p", "This is a list")]),
                    ParentNode("li", [LeafNode("p", "with items")]),
                ],
            ),
        ],
    )
    assert markdown_to_html_node(SAMPLE) == expected


def test_markdown_to_html_node_propagates_block_errors():
    with pytest.raises(ValueError):
        markdown_to_html_node("# Title\n\n```lang\ncode\n```")


def test_text_to_children_malformed_is_empty():
    assert text_to_children("an **unclosed bold") == []


def test_text_to_children_link():
    assert text_to_children("[home](/index.html)") == [
        LeafNode("a", "home", {"href": "/index.html"})
    ]


def test_unclosed_delimiter_block_cannot_render():
    node = block_to_html("an **unclosed bold")
    assert node.children == []
    with pytest.raises(ValueError):
        node.to_html()