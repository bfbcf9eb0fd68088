"""Tests for the model dataclasses."""

import pytest

from bemcheck.model import (
    IdentityShape,
    Modifier,
    NamingError,
    NamingIdentity,
    NodeKind,
    StyleNode,
    ViolationKind,
)


class TestNamingError:
    def test_str_without_file(self) -> None:
        error = NamingError(kind=ViolationKind.INVALID_NAME, message="bad name")
        assert str(error) == "bad name"

    def test_with_file(self) -> None:
        error = NamingError(kind=ViolationKind.FILENAME_MISMATCH, message="mismatch")
        located = error.with_file("a/b.post.css")
        assert located.file_path == "a/b.post.css"
        assert error.file_path is None
        assert str(located) == "in file a/b.post.css, details: mismatch"

    def test_with_file_and_line(self) -> None:
        error = NamingError(kind=ViolationKind.FILENAME_MISMATCH, message="mismatch")
        assert str(error.with_file("x.post.css", line=4)) == "in file x.post.css:4, details: mismatch"

    def test_with_file_keeps_line(self) -> None:
        error = NamingError(kind=ViolationKind.PARSE_ERROR, message="oops", line=7)
        assert error.with_file("x.post.css").line == 7

    def test_frozen(self) -> None:
        error = NamingError(kind=ViolationKind.PARSE_ERROR, message="oops")
        with pytest.raises(AttributeError):
            error.message = "changed"  # type: ignore[misc]


class TestStyleNode:
    def test_defaults(self) -> None:
        node = StyleNode(kind=NodeKind.RULE, selector=".a")
        assert node.is_rule
        assert node.children == ()
        assert node.line is None

    def test_non_rule(self) -> None:
        assert not StyleNode(kind=NodeKind.DECL, name="color", value="red").is_rule


class TestNamingIdentity:
    def test_modifier_default_value(self) -> None:
        assert Modifier(name="disabled").value is True

    def test_shape_with_modifier_only(self) -> None:
        identity = NamingIdentity(entity="a", modifier=Modifier(name="m"))
        assert identity.shape is IdentityShape.ENTITY_MODIFIER
