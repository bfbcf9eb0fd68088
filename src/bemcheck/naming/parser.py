"""BEM naming parser: split a class name into entity, sub-entity and modifier.

Examples with the ``origin`` scheme:
    button                 -> entity
    button_disabled        -> entity + boolean modifier
    button_theme_dark      -> entity + key-value modifier
    button__icon           -> entity + sub-entity
    button__icon_size_s    -> entity + sub-entity + modifier
"""

from __future__ import annotations

import re
from functools import lru_cache

from bemcheck.config import NamingScheme
from bemcheck.model.identity import Modifier, NamingIdentity

__all__ = ["parse_name", "stringify"]


@lru_cache(maxsize=None)
def _name_re(scheme: NamingScheme) -> re.Pattern[str]:
    word = f"(?:{scheme.word_pattern})"
    return re.compile(
        rf"""
        (?P<entity>{word})
        (?:{re.escape(scheme.elem_delim)}(?P<sub_entity>{word}))?
        (?:
            {re.escape(scheme.mod_delim)}(?P<mod_name>{word})
            (?:{re.escape(scheme.mod_val_delim)}(?P<mod_val>{word}))?
        )?
        """,
        re.VERBOSE,
    )


def parse_name(raw: str, scheme: NamingScheme) -> NamingIdentity | None:
    """Decompose *raw* under *scheme*.

    Returns ``None`` when *raw* is not a valid name; never raises for
    malformed input.
    """
    match = _name_re(scheme).fullmatch(raw)
    if match is None:
        return None
    modifier: Modifier | None = None
    if match.group("mod_name") is not None:
        value = match.group("mod_val")
        modifier = Modifier(name=match.group("mod_name"), value=value if value is not None else True)
    return NamingIdentity(
        entity=match.group("entity"),
        sub_entity=match.group("sub_entity"),
        modifier=modifier,
    )


def stringify(identity: NamingIdentity, scheme: NamingScheme) -> str:
    """Build the class name for *identity* under *scheme*."""
    name = identity.entity
    if identity.sub_entity is not None:
        name += scheme.elem_delim + identity.sub_entity
    if identity.modifier is not None:
        name += scheme.mod_delim + identity.modifier.name
        if identity.modifier.value is not True:
            name += scheme.mod_val_delim + str(identity.modifier.value)
    return name
