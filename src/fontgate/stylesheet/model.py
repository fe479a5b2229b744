"""Stylesheet tree model: Root, Rule, AtRule, and Declaration nodes.

Containers own an ordered ``nodes`` list; every child keeps a non-owning
``parent`` back-reference so transforms can edit the tree structurally
(remove a child, insert a sibling after a node) without re-walking it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


class Container:
    """Mixin for nodes that own an ordered list of children."""

    nodes: list[Node]

    def _adopt(self, node: Node) -> None:
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self  # type: ignore[assignment]

    def append(self, *nodes: Node) -> Container:
        """Append *nodes* as the last children, detaching them from any old parent."""
        for node in nodes:
            self._adopt(node)
            self.nodes.append(node)
        return self

    def index(self, node: Node) -> int:
        """Return the position of *node* among this container's children.

        Lookup is by identity, so two equal-looking declarations are never
        confused.
        """
        for i, child in enumerate(self.nodes):
            if child is node:
                return i
        raise ValueError(f"{node!r} is not a child of this container")

    def remove_child(self, node: Node) -> Container:
        del self.nodes[self.index(node)]
        node.parent = None
        return self

    def insert_after(self, existing: Node, node: Node) -> Container:
        """Insert *node* directly after the current position of *existing*."""
        self.index(existing)  # existing must be a child before node is detached
        self._adopt(node)
        self.nodes.insert(self.index(existing) + 1, node)
        return self

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first in document order."""
        for child in self.nodes or ():
            yield child
            if isinstance(child, Container) and child.nodes is not None:
                yield from child.walk()

    def walk_rules(self) -> Iterator[Rule]:
        for node in self.walk():
            if isinstance(node, Rule):
                yield node

    def walk_decls(self) -> Iterator[Declaration]:
        for node in self.walk():
            if isinstance(node, Declaration):
                yield node

    def _adopt_initial(self) -> None:
        for child in self.nodes or ():
            child.parent = self  # type: ignore[assignment]


@dataclass(eq=False)
class Declaration:
    """A single ``prop: value`` pair. ``value`` excludes ``!important``."""

    prop: str
    value: str
    important: bool = False
    parent: Rule | AtRule | Root | None = field(default=None, repr=False)


@dataclass(eq=False)
class Rule(Container):
    """A selector (possibly a comma-separated list) and its children."""

    selector: str
    nodes: list[Node] = field(default_factory=list)
    parent: Root | AtRule | Rule | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt_initial()

    @property
    def declarations(self) -> list[Declaration]:
        return [n for n in self.nodes if isinstance(n, Declaration)]


@dataclass(eq=False)
class AtRule(Container):
    """An ``@name params`` rule; ``nodes`` is None for statement at-rules."""

    name: str
    params: str = ""
    nodes: list[Node] | None = None  # type: ignore[assignment]
    parent: Root | AtRule | Rule | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._adopt_initial()


@dataclass(eq=False)
class Root(Container):
    """Top of a parsed stylesheet."""

    nodes: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._adopt_initial()


Node = Union[Declaration, Rule, AtRule]
