"""
HTML backend for the rendered tree.
"""
from markupsafe import escape

from .tree import Node

VOID_ELEMENTS = {"area", "br", "hr", "img", "input", "link", "meta", "source", "wbr"}


def _attributes(node: Node) -> str:
    parts = []
    if node.classes:
        parts.append(f'class="{escape(" ".join(node.classes))}"')
    for key, value in node.attrs.items():
        parts.append(f'{key}="{escape(value)}"')
    if node.style:
        css = "; ".join(f"{prop}: {value}" for prop, value in node.style.items())
        parts.append(f'style="{escape(css)}"')
    return (" " + " ".join(parts)) if parts else ""


def to_html(node: Node) -> str:
    """Serialize a node and its descendants to markup.

    Text and attribute values are escaped, so user data can never inject
    markup into the document.
    """
    out = []
    _write(node, out)
    return "".join(out)


def _write(node: Node, out: list):
    out.append(f"<{node.tag}{_attributes(node)}>")
    if node.tag in VOID_ELEMENTS:
        return
    for child in node.children:
        if isinstance(child, Node):
            _write(child, out)
        else:
            out.append(str(escape(child)))
    out.append(f"</{node.tag}>")
