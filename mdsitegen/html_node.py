"""HTML node tree used to render generated pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

Props = Mapping[str, str]


def props_to_html(props: Optional[Props]) -> str:
    """Render attributes as ` key="value"` pairs, sorted by key."""
    if not props:
        return ""
    return "".join(f' {key}="{props[key]}"' for key in sorted(props))


class HTMLNode:
    """Base of all HTML nodes."""

    def to_html(self) -> str:
        """A node of no particular kind renders as nothing."""
        return ""


@dataclass
class LeafNode(HTMLNode):
    """A node holding a text value and no children."""

    tag: str
    value: str
    props: Optional[dict[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.props is None:
            self.props = {}

    def to_html(self) -> str:
        if not self.tag:
            return self.value
        attrs = props_to_html(self.props)
        if not self.value:
            if self.tag != "img":
                raise ValueError(
                    "invalid HTML: only img tag can have an empty value"
                )
            return f"<{self.tag}{attrs}>"
        return f"<{self.tag}{attrs}>{self.value}</{self.tag}>"


@dataclass
class ParentNode(HTMLNode):
    """A node wrapping a list of child nodes."""

    tag: str
    children: list[HTMLNode] = field(default_factory=list)
    props: Optional[dict[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.props is None:
            self.props = {}
        if self.children is None:
            self.children = []

    def to_html(self) -> str:
        if not self.tag:
            raise ValueError("invalid HTML: tag is empty")
        if not self.children:
            raise ValueError("invalid HTML: children is empty")
        inner = "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{props_to_html(self.props)}>{inner}</{self.tag}>"