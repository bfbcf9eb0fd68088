"""Tests for rule extraction and selector/path accordance."""

import os

import pytest

from bemcheck.config import NamingConvention, NamingScheme
from bemcheck.model.identity import Modifier, NamingIdentity
from bemcheck.model.node import NodeKind, StyleNode
from bemcheck.model.violation import ViolationKind
from bemcheck.parser import parse_stylesheet
from bemcheck.validation.rules import (
    check_selector_accordance,
    expected_location,
    extract_candidate_rules,
)


def _path(*parts: str) -> str:
    return os.path.join("styles", *parts)


# ---------------------------------------------------------------------------
# extract_candidate_rules
# ---------------------------------------------------------------------------


class TestExtractCandidateRules:
    def test_single_class_rule(self) -> None:
        rules = extract_candidate_rules(parse_stylesheet(".button { color: red; }"))
        assert [r.selector for r in rules] == [".button"]

    def test_keeps_source_order(self) -> None:
        rules = extract_candidate_rules(parse_stylesheet(".foo {} .bar {} .baz {}"))
        assert [r.selector for r in rules] == [".foo", ".bar", ".baz"]

    def test_ignores_tag_and_attribute_selectors(self) -> None:
        root = parse_stylesheet('a {} [type="text"] {} :root { --gap: 4px; } .button {}')
        assert [r.selector for r in extract_candidate_rules(root)] == [".button"]

    def test_lone_dot_is_not_a_class(self) -> None:
        root = StyleNode(
            kind=NodeKind.ROOT, children=(StyleNode(kind=NodeKind.RULE, selector="."),)
        )
        assert extract_candidate_rules(root) == []

    def test_dot_anywhere_in_selector(self) -> None:
        root = parse_stylesheet("div.button {}")
        assert [r.selector for r in extract_candidate_rules(root)] == ["div.button"]

    def test_nested_rules_are_not_candidates(self) -> None:
        root = parse_stylesheet(".button { .button__icon {} .button__text {} }")
        assert [r.selector for r in extract_candidate_rules(root)] == [".button"]

    def test_rules_inside_at_rules_are_not_candidates(self) -> None:
        root = parse_stylesheet("@media print { .button {} .link {} }")
        assert extract_candidate_rules(root) == []

    def test_declarations_and_comments_only(self) -> None:
        root = parse_stylesheet("/* vars */\n$gap: 4px;\n@import 'x.css';")
        assert extract_candidate_rules(root) == []

    def test_empty_tree(self) -> None:
        assert extract_candidate_rules(StyleNode(kind=NodeKind.ROOT)) == []


# ---------------------------------------------------------------------------
# Filename accordance
# ---------------------------------------------------------------------------


class TestFilenameAccordance:
    def test_mismatch(self) -> None:
        error = check_selector_accordance(".button", _path("button", "button-x.post.css"))
        assert error is not None
        assert error.kind is ViolationKind.FILENAME_MISMATCH
        assert error.selector == ".button"
        assert error.message == 'css selector ".button" does not match filename'

    def test_mismatch_wins_over_structure(self) -> None:
        error = check_selector_accordance(".button", _path("wrong", "link.post.css"))
        assert error.kind is ViolationKind.FILENAME_MISMATCH

    def test_case_sensitive(self) -> None:
        error = check_selector_accordance(".button", _path("button", "Button.post.css"))
        assert error.kind is ViolationKind.FILENAME_MISMATCH

    def test_other_extension_is_not_stripped(self) -> None:
        error = check_selector_accordance(".button", _path("button", "button.css"))
        assert error.kind is ViolationKind.FILENAME_MISMATCH

    def test_custom_suffix(self) -> None:
        convention = NamingConvention(suffix=".css")
        assert check_selector_accordance(".button", _path("button", "button.css"), convention) is None


# ---------------------------------------------------------------------------
# Naming decomposition
# ---------------------------------------------------------------------------


class TestInvalidName:
    def test_not_bem(self) -> None:
        error = check_selector_accordance(".Button", _path("Button", "Button.post.css"))
        assert error.kind is ViolationKind.INVALID_NAME
        assert error.raw_name == "Button"
        assert error.message == 'css selector ".Button" not in BEM methodology'

    def test_compound_selector(self) -> None:
        error = check_selector_accordance(
            ".button.active", _path("button", "button.active.post.css")
        )
        assert error.kind is ViolationKind.INVALID_NAME

    def test_alternate_scheme(self) -> None:
        convention = NamingConvention(scheme=NamingScheme(word_pattern=r"[a-zA-Z0-9]+"))
        path = _path("Button", "Button.post.css")
        assert check_selector_accordance(".Button", path, convention) is None


# ---------------------------------------------------------------------------
# Structural accordance
# ---------------------------------------------------------------------------


class TestEntityShape:
    def test_ok(self) -> None:
        assert check_selector_accordance(".button", _path("button", "button.post.css")) is None

    def test_wrong_parent(self) -> None:
        error = check_selector_accordance(".button", _path("wrong", "button.post.css"))
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH
        assert error.message == "css selector .button does not match file structure"
        assert error.fix == os.path.join("button", "button.post.css")

    def test_file_at_path_root(self) -> None:
        error = check_selector_accordance(".button", "button.post.css")
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH


class TestEntityModifierShape:
    def test_ok(self) -> None:
        path = _path("button", "_disabled", "button_disabled.post.css")
        assert check_selector_accordance(".button_disabled", path) is None

    def test_key_value_modifier_uses_name_directory(self) -> None:
        path = _path("button", "_theme", "button_theme_dark.post.css")
        assert check_selector_accordance(".button_theme_dark", path) is None

    def test_missing_modifier_directory(self) -> None:
        path = _path("button", "button_disabled.post.css")
        error = check_selector_accordance(".button_disabled", path)
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH
        assert error.fix == os.path.join("button", "_disabled", "button_disabled.post.css")

    def test_wrong_entity_directory(self) -> None:
        path = _path("link", "_disabled", "button_disabled.post.css")
        error = check_selector_accordance(".button_disabled", path)
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH


class TestSubEntityShape:
    def test_ok(self) -> None:
        path = _path("button", "__icon", "button__icon.post.css")
        assert check_selector_accordance(".button__icon", path) is None

    def test_missing_prefix(self) -> None:
        path = _path("button", "icon", "button__icon.post.css")
        error = check_selector_accordance(".button__icon", path)
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH

    def test_flat_layout(self) -> None:
        path = _path("button", "button__icon.post.css")
        error = check_selector_accordance(".button__icon", path)
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH
        assert error.fix == os.path.join("button", "__icon", "button__icon.post.css")


class TestSubEntityModifierShape:
    def test_ok(self) -> None:
        path = _path("button", "__icon", "_size", "button__icon_size_s.post.css")
        assert check_selector_accordance(".button__icon_size_s", path) is None

    def test_modifier_directory_under_entity(self) -> None:
        path = _path("button", "_size", "button__icon_size_s.post.css")
        error = check_selector_accordance(".button__icon_size_s", path)
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH

    def test_path_too_short(self) -> None:
        path = os.path.join("__icon", "_size", "button__icon_size_s.post.css")
        error = check_selector_accordance(".button__icon_size_s", path)
        assert error.kind is ViolationKind.STRUCTURAL_MISMATCH


class TestCustomDirectoryPrefixes:
    def test_prefixes_come_from_convention(self) -> None:
        convention = NamingConvention(elem_dir_prefix="elem-", mod_dir_prefix="mod-")
        path = _path("button", "elem-icon", "mod-size", "button__icon_size_s.post.css")
        assert check_selector_accordance(".button__icon_size_s", path, convention) is None

    def test_two_dashes_modifier_directory(self) -> None:
        convention = NamingConvention.from_preset("two-dashes")
        path = _path("button", "_disabled", "button--disabled.post.css")
        assert check_selector_accordance(".button--disabled", path, convention) is None


# ---------------------------------------------------------------------------
# expected_location
# ---------------------------------------------------------------------------


class TestExpectedLocation:
    @pytest.mark.parametrize(
        "identity, parts",
        [
            (NamingIdentity(entity="button"), ["button", "button.post.css"]),
            (
                NamingIdentity(entity="button", modifier=Modifier(name="theme", value="dark")),
                ["button", "_theme", "button_theme_dark.post.css"],
            ),
            (
                NamingIdentity(entity="button", sub_entity="icon"),
                ["button", "__icon", "button__icon.post.css"],
            ),
            (
                NamingIdentity(entity="button", sub_entity="icon", modifier=Modifier(name="hidden")),
                ["button", "__icon", "_hidden", "button__icon_hidden.post.css"],
            ),
        ],
    )
    def test_location(self, identity: NamingIdentity, parts: list[str]) -> None:
        assert expected_location(identity, NamingConvention()) == os.path.join(*parts)
