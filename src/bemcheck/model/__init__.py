"""bemcheck model layer -- public type re-exports."""

from bemcheck.model.identity import IdentityShape, Modifier, NamingIdentity
from bemcheck.model.node import NodeKind, StyleNode
from bemcheck.model.violation import NamingError, ViolationKind

__all__ = [
    # node
    "NodeKind",
    "StyleNode",
    # identity
    "IdentityShape",
    "Modifier",
    "NamingIdentity",
    # violation
    "ViolationKind",
    "NamingError",
]
