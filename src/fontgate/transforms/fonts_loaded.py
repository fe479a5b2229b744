"""Fonts-loaded class transform: gate web-font declarations behind a marker class.

Given ``families=["MyWebFont"]``::

    .a, .b { color: red; font-family: "MyWebFont", sans-serif; }

becomes::

    .a, .b { color: red; }
    .wf-loaded .a,.wf-loaded .b { font-family: "MyWebFont", sans-serif; }

so the web font is only applied once a loader script adds ``wf-loaded`` to
the document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from fontgate.config import FontsLoadedConfig
from fontgate.stylesheet.model import Declaration, Root, Rule

logger = logging.getLogger(__name__)

FONT_FAMILY = "font-family"


@dataclass(frozen=True)
class PendingMove:
    """A declaration detached from *rule* during the walk, awaiting insertion.

    ``index`` is the rule's position in its parent when it was walked. It is
    informational only; insertion always targets the rule's live position.
    """

    rule: Rule
    declaration: Declaration
    index: int


def is_web_font(value: str, families: Sequence[str]) -> bool:
    """Return True if any comma-separated token of *value* contains a family.

    Tokens are not trimmed or unquoted, and matching is by substring, so
    ``"Web"`` matches ``MyWebFontThing``. Empty family names never match.
    """
    return any(
        family and family in token for token in value.split(",") for family in families
    )


def gated_selector(selector: str, class_name: str) -> str:
    """Scope every part of *selector* under ``.class_name``.

    A bare ``html`` part becomes ``html.class_name`` since the marker class
    lives on the root element itself.
    """
    parts = []
    for part in selector.split(","):
        if part.strip() == "html":
            parts.append(f"html.{class_name}")
        else:
            parts.append(f".{class_name} {part}")
    return ",".join(parts)


class FontsLoadedClassTransform:
    """Move web-font ``font-family`` declarations into gated sibling rules.

    Runs in two passes so the tree is never restructured while it is being
    walked: matching declarations are detached and recorded first, then a
    new rule is inserted after each source rule. Rules left without
    declarations stay in place. Applying the transform twice gates the
    moved declarations again.
    """

    def __init__(self, config: FontsLoadedConfig | None = None):
        self.config = config or FontsLoadedConfig()

    def _collect(self, root: Root) -> list[PendingMove]:
        moves: list[PendingMove] = []
        for rule in list(root.walk_rules()):
            index: int | None = None
            for decl in rule.declarations:
                if decl.prop != FONT_FAMILY:
                    continue
                if not is_web_font(decl.value, self.config.families):
                    continue
                if index is None:
                    # Looked up once per rule, and only for rules with a match.
                    index = rule.parent.index(rule) if rule.parent is not None else -1
                rule.remove_child(decl)
                moves.append(PendingMove(rule=rule, declaration=decl, index=index))
        return moves

    def apply(self, root: Root) -> Root:
        moves = self._collect(root)
        for move in moves:
            selector = gated_selector(move.rule.selector, self.config.class_name)
            new_rule = Rule(selector=selector)
            new_rule.append(move.declaration)
            move.rule.parent.insert_after(move.rule, new_rule)  # type: ignore[union-attr]
            logger.debug(
                "Gated %s: %s under %r", move.rule.selector, move.declaration.value, selector
            )
        logger.debug("Gated %d web font declaration(s)", len(moves))
        return root


def fonts_loaded_class(
    root: Root,
    config: FontsLoadedConfig | Mapping[str, object] | None = None,
) -> Root:
    """Gate web-font declarations in *root* in place and return it.

    *config* may be a :class:`FontsLoadedConfig`, an options mapping such as
    ``{"families": ["MyWebFont"], "className": "fonts-ready"}``, or None.
    """
    if not isinstance(config, FontsLoadedConfig):
        config = FontsLoadedConfig.from_options(config)
    return FontsLoadedClassTransform(config).apply(root)
