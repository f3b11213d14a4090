"""
Backend-neutral visual tree produced by the layouts.

A ``Node`` is an element with classes, attributes, inline style and children
(nodes or plain text). The live preview consumes ``Node.to_dict()``; the
exporter serializes the same tree with ``folio.render.html.to_html``.
"""
from typing import Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, Field

SECTION_ATTR = "data-section"


class Node(BaseModel):
    """One element of the rendered tree."""
    tag: str
    classes: List[str] = Field(default_factory=list)
    attrs: Dict[str, str] = Field(default_factory=dict)
    style: Dict[str, str] = Field(default_factory=dict)
    children: List[Union["Node", str]] = Field(default_factory=list)

    @property
    def section(self) -> Optional[str]:
        return self.attrs.get(SECTION_ATTR)

    def iter_nodes(self) -> Iterator["Node"]:
        """Depth-first walk over this node and its element descendants."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter_nodes()

    def iter_text(self) -> Iterator[str]:
        """Yield every text child, in document order."""
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter_text()
            else:
                yield child

    def text_content(self) -> str:
        return "".join(self.iter_text())

    def find(self, section: str) -> Optional["Node"]:
        """First descendant tagged with the given section name."""
        for node in self.iter_nodes():
            if node.section == section:
                return node
        return None

    def sections(self) -> List[str]:
        """Section names in document order."""
        return [node.section for node in self.iter_nodes() if node.section]

    def find_all(self, class_name: str) -> List["Node"]:
        return [node for node in self.iter_nodes() if class_name in node.classes]

    def to_dict(self) -> dict:
        """JSON-ready tree for the interactive preview."""
        return self.model_dump(exclude_defaults=True)


Node.model_rebuild()


def _flatten(children, out: List[Union[Node, str]]):
    for child in children:
        if child is None or child is False or child == "":
            continue
        if isinstance(child, (Node, str)):
            out.append(child)
        else:
            _flatten(child, out)
    return out


def el(tag: str, *children, cls: Optional[str] = None,
       style: Optional[Dict[str, str]] = None, **attrs) -> Node:
    """Build a node.

    Children may be nodes, strings, None (skipped) or nested iterables.
    Keyword attributes map ``data_index`` to ``data-index``; a trailing
    underscore is dropped (``for_`` -> ``for``). None values are skipped.
    """
    attributes = {}
    for key, value in attrs.items():
        if value is None:
            continue
        attributes[key.rstrip("_").replace("_", "-")] = str(value)
    return Node(
        tag=tag,
        classes=cls.split() if cls else [],
        attrs=attributes,
        style=dict(style or {}),
        children=_flatten(children, []),
    )


def section(name: str, *children, cls: Optional[str] = None, tag: str = "section", **attrs) -> Node:
    """Build a node tagged as a named section (hero, skills, projects...)."""
    node = el(tag, *children, cls=cls, **attrs)
    node.attrs[SECTION_ATTR] = name
    return node


def data_values(node: Node) -> List[str]:
    """Text children plus link and image targets, the user-visible data."""
    values = list(node.iter_text())
    for child in node.iter_nodes():
        for attr in ("href", "src"):
            if attr in child.attrs:
                values.append(child.attrs[attr])
    return values
