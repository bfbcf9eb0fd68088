"""Accordance rules for style-sheet files.

``extract_candidate_rules`` picks the top-level class rules of a parsed file;
``check_selector_accordance`` checks one selector against the file's name and
its place in the block/element/modifier directory tree.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePath

from bemcheck.config import DEFAULT_CONVENTION, NamingConvention
from bemcheck.model.identity import NamingIdentity
from bemcheck.model.node import StyleNode
from bemcheck.model.violation import NamingError, ViolationKind
from bemcheck.naming import parse_name, stringify

# A literal dot followed by at least one character.
_CLASS_SELECTOR_RE = re.compile(r"\..+")


# ---------------------------------------------------------------------------
# Rule extraction
# ---------------------------------------------------------------------------


def extract_candidate_rules(root: StyleNode) -> list[StyleNode]:
    """Direct children of *root* that are rules with a class-like selector."""
    return [
        node
        for node in root.children
        if node.is_rule and _CLASS_SELECTOR_RE.search(node.selector)
    ]


# ---------------------------------------------------------------------------
# Path accordance
# ---------------------------------------------------------------------------


def _strip_suffix(name: str, suffix: str) -> str:
    if name.endswith(suffix) and name != suffix:
        return name[: -len(suffix)]
    return name


def _segment(parts: tuple[str, ...], offset: int) -> str | None:
    """Path component *offset* places from the end, if the path is that deep."""
    if offset > len(parts):
        return None
    return parts[-offset]


def expected_location(identity: NamingIdentity, convention: NamingConvention) -> str:
    """Relative path a file declaring *identity* must live at."""
    parts = [identity.entity]
    if identity.sub_entity is not None:
        parts.append(convention.elem_dir_prefix + identity.sub_entity)
    if identity.modifier is not None:
        parts.append(convention.mod_dir_prefix + identity.modifier.name)
    parts.append(stringify(identity, convention.scheme) + convention.suffix)
    return str(PurePath(*parts))


def _structure_matches(
    identity: NamingIdentity, parts: tuple[str, ...], convention: NamingConvention
) -> bool:
    entity, sub_entity, modifier = identity.entity, identity.sub_entity, identity.modifier
    elem_dir = f"{convention.elem_dir_prefix}{sub_entity}"
    mod_dir = f"{convention.mod_dir_prefix}{modifier.name}" if modifier else None

    # The order of these branches is significant: a modifier without a
    # sub-entity always takes the entity + modifier layout.
    if not sub_entity and not modifier:  # entity/<file>
        return _segment(parts, 2) == entity
    elif not sub_entity:  # entity/_mod/<file>
        return all([
            _segment(parts, 3) == entity,
            _segment(parts, 2) == mod_dir,
        ])
    elif modifier:  # entity/__elem/_mod/<file>
        return all([
            _segment(parts, 4) == entity,
            _segment(parts, 3) == elem_dir,
            _segment(parts, 2) == mod_dir,
        ])
    else:  # entity/__elem/<file>
        return all([
            _segment(parts, 3) == entity,
            _segment(parts, 2) == elem_dir,
        ])


def check_selector_accordance(
    selector: str,
    file_path: str | Path,
    convention: NamingConvention = DEFAULT_CONVENTION,
) -> NamingError | None:
    """Check that *selector* agrees with the name and location of *file_path*.

    Returns ``None`` when it does, otherwise the first failed check as a
    :class:`NamingError` of kind FILENAME_MISMATCH, INVALID_NAME or
    STRUCTURAL_MISMATCH.
    """
    path = PurePath(file_path)
    raw_selector = selector[1:]
    file_name_without_ext = _strip_suffix(path.name, convention.suffix)

    if raw_selector != file_name_without_ext:
        return NamingError(
            kind=ViolationKind.FILENAME_MISMATCH,
            message=f'css selector "{selector}" does not match filename',
            selector=selector,
        )

    identity = parse_name(raw_selector, convention.scheme)
    if identity is None:
        return NamingError(
            kind=ViolationKind.INVALID_NAME,
            message=f'css selector "{selector}" not in BEM methodology',
            selector=selector,
            raw_name=raw_selector,
        )

    if not _structure_matches(identity, path.parts, convention):
        return NamingError(
            kind=ViolationKind.STRUCTURAL_MISMATCH,
            message=f"css selector {selector} does not match file structure",
            selector=selector,
            fix=expected_location(identity, convention),
        )
    return None
