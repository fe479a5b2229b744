"""Serialize a stylesheet tree back to CSS text."""

from __future__ import annotations

from fontgate.stylesheet.model import AtRule, Declaration, Node, Root, Rule

__all__ = ["stringify"]


def _declaration(decl: Declaration) -> str:
    suffix = " !important" if decl.important else ""
    return f"{decl.prop}: {decl.value}{suffix};"


def _block(header: str, children: list[Node], indent: str, depth: int) -> list[str]:
    pad = indent * depth
    lines = [f"{pad}{header} {{"]
    for child in children:
        lines.extend(_node(child, indent, depth + 1))
    lines.append(f"{pad}}}")
    return lines


def _node(node: Node, indent: str, depth: int) -> list[str]:
    if isinstance(node, Declaration):
        return [indent * depth + _declaration(node)]
    if isinstance(node, Rule):
        return _block(node.selector, node.nodes, indent, depth)
    if isinstance(node, AtRule):
        header = f"@{node.name} {node.params}" if node.params else f"@{node.name}"
        if node.nodes is None:
            return [f"{indent * depth}{header};"]
        return _block(header, node.nodes, indent, depth)
    raise TypeError(f"Cannot stringify {type(node).__name__}")


def stringify(root: Root, indent: str = "    ") -> str:
    """Render *root* as CSS, separating top-level nodes with a blank line."""
    chunks = ["\n".join(_node(node, indent, 0)) for node in root.nodes]
    if not chunks:
        return ""
    return "\n\n".join(chunks) + "\n"
