"""Block-level markdown: splitting a document into blocks and rendering them."""

from __future__ import annotations

from enum import Enum

from mdsitegen.html_node import HTMLNode, ParentNode
from mdsitegen.textnode import TextNode, TextType, text_to_text_nodes

_HEADER_PREFIXES = tuple("#" * level + " " for level in range(1, 7))
_CODE_FENCE = "```"


class BlockType(Enum):
    """Kind of markdown block."""

    PARAGRAPH = "paragraph"
    HEADER = "header"
    CODE = "code"
    QUOTE = "quote"
    OLIST = "olist"
    ULIST = "ulist"

    def __str__(self) -> str:
        return self.value


def markdown_to_blocks(markdown: str) -> list[str]:
    """Split a document on blank lines into trimmed blocks."""
    return [block.strip() for block in markdown.split("\n\n") if block]


def _is_ordered(lines: list[str]) -> bool:
    return all(
        line.startswith(f"{number}. ") for number, line in enumerate(lines, 1)
    )


def get_block_type(block: str) -> BlockType:
    """Classify a block by its leading markers."""
    lines = block.split("\n")
    if block.startswith(_HEADER_PREFIXES):
        return BlockType.HEADER
    if (
        len(lines) > 1
        and lines[0].startswith(_CODE_FENCE)
        and lines[-1].endswith(_CODE_FENCE)
    ):
        return BlockType.CODE
    if block.startswith(">"):
        if all(line.startswith(">") for line in lines):
            return BlockType.QUOTE
        return BlockType.PARAGRAPH
    if block.startswith("- "):
        if all(line.startswith("- ") for line in lines):
            return BlockType.ULIST
        return BlockType.PARAGRAPH
    if block.startswith("1. "):
        if _is_ordered(lines):
            return BlockType.OLIST
        return BlockType.PARAGRAPH
    return BlockType.PARAGRAPH


def extract_title(markdown: str) -> str:
    """Return the text of the H1 header that opens the document."""
    blocks = markdown_to_blocks(markdown)
    if not blocks:
        raise ValueError("no content")
    first_line = blocks[0].split("\n", 1)[0]
    if not first_line.startswith("# "):
        raise ValueError("first line is not a header (H1)")
    return first_line.removeprefix("# ")


def text_to_children(text: str) -> list[HTMLNode]:
    """Render inline markdown as HTML nodes; malformed text gives no nodes."""
    try:
        return [node.to_html_node() for node in text_to_text_nodes(text)]
    except ValueError:
        return []


def _list_item(text: str) -> ParentNode:
    return ParentNode("li", text_to_children(text))


def _paragraph_to_html(block: str) -> ParentNode:
    return ParentNode("p", text_to_children(block.replace("\n", " ")))


def _header_to_html(block: str) -> ParentNode:
    level = len(block) - len(block.lstrip("#"))
    if level + 1 == len(block):
        raise ValueError("invalid header level")
    return ParentNode(f"h{level}", text_to_children(block[level + 1:]))


def _code_to_html(block: str) -> ParentNode:
    opening, closing = _CODE_FENCE + "\n", "\n" + _CODE_FENCE
    if (
        len(block) < len(opening) + len(closing)
        or not block.startswith(opening)
        or not block.endswith(closing)
    ):
        raise ValueError("invalid code block")
    code = block[len(opening):-len(closing)]
    code_node = ParentNode("code", [TextNode(TextType.PLAIN, code).to_html_node()])
    return ParentNode("pre", [code_node])


def _quote_to_html(block: str) -> ParentNode:
    lines = []
    for line in block.split("\n"):
        if not line.startswith(">"):
            raise ValueError("invalid quote block")
        lines.append(line[1:].strip())
    return ParentNode("blockquote", text_to_children(" ".join(lines)))


def _ulist_to_html(block: str) -> ParentNode:
    items = []
    for line in block.split("\n"):
        if not line.startswith("- "):
            raise ValueError("invalid ulist block")
        items.append(_list_item(line[2:].strip()))
    return ParentNode("ul", items)


def _olist_to_html(block: str) -> ParentNode:
    items = []
    for number, line in enumerate(block.split("\n"), 1):
        if not line.startswith(f"{number}. "):
            raise ValueError("invalid olist block")
        items.append(_list_item(line[2:].strip()))
    return ParentNode("ol", items)


_CONVERTERS = {
    BlockType.PARAGRAPH: _paragraph_to_html,
    BlockType.HEADER: _header_to_html,
    BlockType.CODE: _code_to_html,
    BlockType.QUOTE: _quote_to_html,
    BlockType.OLIST: _olist_to_html,
    BlockType.ULIST: _ulist_to_html,
}


def block_to_html(block: str) -> ParentNode:
    """Render one markdown block as an HTML node."""
    block_type = get_block_type(block)
    try:
        converter = _CONVERTERS[block_type]
    except KeyError:
        raise ValueError(f"unknown block type: {block_type}") from None
    return converter(block)


def markdown_to_html_node(markdown: str) -> ParentNode:
    """Render a whole document as a `div` holding one node per block."""
    return ParentNode(
        "div", [block_to_html(block) for block in markdown_to_blocks(markdown)]
    )