"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from fontgate.stylesheet.model import Root


class Transform(Protocol):
    """A tree-to-tree transformation step. Implementations may mutate *root*."""

    def apply(self, root: Root) -> Root: ...
