"""Inline markdown: text nodes, delimiter splitting and links/images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from mdsitegen.html_node import LeafNode

DELIMITER_BOLD = "**"
DELIMITER_ITALIC = "_"
DELIMITER_CODE = "`"

_REF_PATTERN = re.compile(r"\[([^\[\]]*)\]\(([^\(\)]*)\)")


class TextType(Enum):
    """Kind of inline text."""

    PLAIN = "Plain"
    BOLD = "Bold"
    ITALIC = "Italic"
    CODE = "Code"
    LINK = "Link"
    IMAGE = "Image"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextNode:
    """A run of inline text of one kind."""

    text_type: TextType
    value: str
    url: str = ""

    def __str__(self) -> str:
        if not self.url:
            return f"Node{{type: {self.text_type}, value: {self.value}}}"
        return (
            f"Node{{type: {self.text_type}, value: {self.value}, "
            f"url: {self.url}}}"
        )

    def to_html_node(self) -> LeafNode:
        """Convert to the HTML leaf node that renders this text."""
        kind = self.text_type
        if kind is TextType.PLAIN:
            return LeafNode("p", self.value)
        if kind is TextType.BOLD:
            return LeafNode("b", self.value)
        if kind is TextType.ITALIC:
            return LeafNode("i", self.value)
        if kind is TextType.CODE:
            return LeafNode("code", self.value)
        if kind is TextType.LINK:
            return LeafNode("a", self.value, {"href": self.url})
        if kind is TextType.IMAGE:
            return LeafNode("img", "", {"src": self.url, "alt": self.value})
        raise ValueError(f"unknown text type: {kind!r}")


class RefType(Enum):
    """Kind of markdown reference."""

    LINK = "link"
    IMAGE = "image"


@dataclass(frozen=True)
class Ref:
    """A link or image found in text, with its span."""

    ref_type: RefType
    text: str
    url: str
    start: int
    end: int


def extract_markdown_refs(text: str) -> list[Ref]:
    """Find `[alt](url)` links and `![alt](url)` images in text."""
    refs = []
    for match in _REF_PATTERN.finditer(text):
        alt, url = match.group(1), match.group(2)
        start, end = match.span()
        if start > 0 and text[start - 1] == "!":
            refs.append(Ref(RefType.IMAGE, alt, url, start - 1, end))
        else:
            refs.append(Ref(RefType.LINK, alt, url, start, end))
    return refs


def split_nodes_delimiter(
    old_nodes: list[TextNode], delimiter: str, text_type: TextType
) -> list[TextNode]:
    """Split plain nodes on a paired delimiter into alternating kinds."""
    new_nodes = []
    for node in old_nodes:
        if node.text_type is not TextType.PLAIN:
            new_nodes.append(node)
            continue
        sections = node.value.split(delimiter)
        if len(sections) % 2 == 0:
            raise ValueError(
                f"invalid markdown: delimiter {delimiter} is not closed"
            )
        for index, section in enumerate(sections):
            if not section:
                continue
            kind = TextType.PLAIN if index % 2 == 0 else text_type
            new_nodes.append(TextNode(kind, section))
    return new_nodes


def split_nodes_ref(old_nodes: list[TextNode]) -> list[TextNode]:
    """Split plain nodes around links and images."""
    new_nodes = []
    for node in old_nodes:
        if node.text_type is not TextType.PLAIN:
            new_nodes.append(node)
            continue
        cursor = 0
        for ref in extract_markdown_refs(node.value):
            kind = TextType.IMAGE if ref.ref_type is RefType.IMAGE else TextType.LINK
            if ref.start > cursor:
                new_nodes.append(
                    TextNode(TextType.PLAIN, node.value[cursor:ref.start])
                )
            new_nodes.append(TextNode(kind, ref.text, ref.url))
            cursor = ref.end
        if cursor < len(node.value):
            new_nodes.append(TextNode(TextType.PLAIN, node.value[cursor:]))
    return new_nodes


def text_to_text_nodes(text: str) -> list[TextNode]:
    """Parse inline markdown into a list of text nodes."""
    nodes = [TextNode(TextType.PLAIN, text)]
    steps = (
        ("bold", DELIMITER_BOLD, TextType.BOLD),
        ("italic", DELIMITER_ITALIC, TextType.ITALIC),
        ("code", DELIMITER_CODE, TextType.CODE),
    )
    for name, delimiter, kind in steps:
        try:
            nodes = split_nodes_delimiter(nodes, delimiter, kind)
        except ValueError as err:
            raise ValueError(f"error ({name})") from err
    try:
        return split_nodes_ref(nodes)
    except ValueError as err:
        raise ValueError("error (ref)") from err