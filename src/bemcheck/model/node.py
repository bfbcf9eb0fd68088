"""Style-sheet tree model: StyleNode and NodeKind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    """Kinds of node produced by the style-sheet parser."""

    ROOT = "root"
    RULE = "rule"
    ATRULE = "atrule"
    DECL = "decl"
    COMMENT = "comment"


@dataclass(frozen=True)
class StyleNode:
    """A single node of a parsed style-sheet.

    Attributes:
        kind: What this node represents.
        selector: Selector text, set for rules only.
        name: At-rule name (without ``@``) or declaration property.
        value: At-rule params, declaration value, or comment text.
        children: Direct children, in source order, for the root, rules and
            block at-rules.
        line: 1-based source line where the node starts, if known.
    """

    kind: NodeKind
    selector: str = ""
    name: str = ""
    value: str = ""
    children: tuple[StyleNode, ...] = ()
    line: int | None = None

    @property
    def is_rule(self) -> bool:
        return self.kind is NodeKind.RULE
