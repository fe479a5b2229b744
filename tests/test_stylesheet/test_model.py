"""Tests for the stylesheet tree model."""

import pytest

from fontgate.stylesheet import AtRule, Declaration, Root, Rule


class TestParentLinks:
    def test_constructor_adopts_children(self):
        decl = Declaration("color", "red")
        rule = Rule(".a", [decl])
        root = Root(nodes=[rule])
        assert decl.parent is rule
        assert rule.parent is root

    def test_detached_by_default(self):
        assert Declaration("color", "red").parent is None
        assert Rule(".a").parent is None

    def test_statement_at_rule_has_no_body(self):
        at = AtRule("import", '"x.css"')
        assert at.nodes is None
        assert list(at.walk()) == []


class TestStructuralEdits:
    def test_append(self):
        rule = Rule(".a")
        decl = Declaration("color", "red")
        rule.append(decl)
        assert rule.nodes == [decl]
        assert decl.parent is rule

    def test_append_moves_between_parents(self):
        decl = Declaration("color", "red")
        old = Rule(".a", [decl])
        new = Rule(".b")
        new.append(decl)
        assert old.nodes == []
        assert new.nodes == [decl]
        assert decl.parent is new

    def test_remove_child(self):
        decl = Declaration("color", "red")
        rule = Rule(".a", [decl])
        rule.remove_child(decl)
        assert rule.nodes == []
        assert decl.parent is None

    def test_remove_is_by_identity(self):
        first = Declaration("color", "red")
        second = Declaration("color", "red")
        rule = Rule(".a", [first, second])
        rule.remove_child(second)
        assert rule.nodes == [first]

    def test_remove_missing_child(self):
        with pytest.raises(ValueError):
            Rule(".a").remove_child(Declaration("color", "red"))

    def test_insert_after(self):
        a, b, c = Rule(".a"), Rule(".b"), Rule(".c")
        root = Root(nodes=[a, c])
        root.insert_after(a, b)
        assert root.nodes == [a, b, c]
        assert b.parent is root

    def test_insert_after_last(self):
        a, b = Rule(".a"), Rule(".b")
        root = Root(nodes=[a])
        root.insert_after(a, b)
        assert root.nodes == [a, b]

    def test_insert_after_reorders_existing_child(self):
        a, b, c = Rule(".a"), Rule(".b"), Rule(".c")
        root = Root(nodes=[a, b, c])
        root.insert_after(c, a)
        assert root.nodes == [b, c, a]

    def test_insert_after_unknown_reference(self):
        decl = Declaration("color", "red")
        source = Rule(".src", [decl])
        with pytest.raises(ValueError):
            Rule(".a").insert_after(Rule(".x"), decl)
        # The node stays where it was.
        assert decl.parent is source

    def test_index(self):
        a, b = Rule(".a"), Rule(".b")
        root = Root(nodes=[a, b])
        assert root.index(b) == 1


class TestWalk:
    def test_document_order(self):
        inner = Rule(".inner", [Declaration("color", "red")])
        media = AtRule("media", "print", [inner])
        outer = Rule(".outer", [Declaration("margin", "0")])
        root = Root(nodes=[outer, media])
        assert [type(n).__name__ for n in root.walk()] == [
            "Rule",
            "Declaration",
            "AtRule",
            "Rule",
            "Declaration",
        ]

    def test_walk_rules_includes_nested(self):
        inner = Rule(".inner")
        root = Root(nodes=[Rule(".a"), AtRule("media", "print", [inner])])
        assert [r.selector for r in root.walk_rules()] == [".a", ".inner"]

    def test_walk_decls(self):
        root = Root(nodes=[Rule(".a", [Declaration("a", "1"), Declaration("b", "2")])])
        assert [d.prop for d in root.walk_decls()] == ["a", "b"]

    def test_declarations_property(self):
        decl = Declaration("color", "red")
        rule = Rule(".a", [decl, Rule(".nested")])
        assert rule.declarations == [decl]
