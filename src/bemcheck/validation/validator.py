"""Directory validator: checks every style-sheet under a root, first failure wins."""

from __future__ import annotations

import logging
from pathlib import Path

from bemcheck.config import DEFAULT_CONVENTION, NamingConvention
from bemcheck.discovery import find_stylesheets
from bemcheck.model.violation import NamingError, ViolationKind
from bemcheck.parser import ParseError, parse_stylesheet
from bemcheck.validation.rules import check_selector_accordance, extract_candidate_rules

logger = logging.getLogger(__name__)


class NamingViolation(Exception):
    """Raised when a style-sheet tree breaks the naming convention."""

    def __init__(self, error: NamingError) -> None:
        self.error = error
        super().__init__(str(error))


def check_file(
    path: str | Path, convention: NamingConvention = DEFAULT_CONVENTION
) -> NamingError | None:
    """Check a single style-sheet file.

    Returns ``None`` when the file is accordant or declares no class rule,
    otherwise a :class:`NamingError` naming the file. ``OSError`` from
    reading the file propagates.
    """
    file_path = str(path)
    try:
        source = Path(path).read_text(encoding="utf-8-sig")
        root = parse_stylesheet(source)
    except UnicodeDecodeError as exc:
        return NamingError(
            kind=ViolationKind.PARSE_ERROR,
            message=f"cannot decode file as utf-8: {exc.reason}",
            file_path=file_path,
        )
    except ParseError as exc:
        return NamingError(
            kind=ViolationKind.PARSE_ERROR,
            message=f"parse error: {exc}",
            file_path=file_path,
            line=exc.line,
        )

    rules = extract_candidate_rules(root)

    # No class rules is fine: the file may only hold variables or imports.
    if not rules:
        logger.debug("skipping %s: no top-level class rules", file_path)
        return None

    if len(rules) > 1:
        return NamingError(
            kind=ViolationKind.TOO_MANY_RULES,
            message=f"too much selectors: {len(rules)} top-level class rules found",
            selector=rules[1].selector,
            file_path=file_path,
            line=rules[1].line,
        )

    rule = rules[0]
    error = check_selector_accordance(rule.selector, file_path, convention)
    if error is not None:
        return error.with_file(file_path, line=rule.line)
    logger.debug("%s: %s is accordant", file_path, rule.selector)
    return None


def check_naming(
    directory: str | Path, convention: NamingConvention = DEFAULT_CONVENTION
) -> NamingError | None:
    """Check every style-sheet under *directory*.

    Files are visited in sorted path order and the first violation is
    returned; ``None`` means every file is accordant. Raises
    ``NotADirectoryError`` if *directory* does not exist.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    files = find_stylesheets(root, convention.suffix)
    logger.debug("found %d file(s) matching *%s under %s", len(files), convention.suffix, root)
    for path in files:
        error = check_file(path, convention)
        if error is not None:
            logger.info("naming violation: %s", error)
            return error
    return None


def check_naming_or_raise(
    directory: str | Path, convention: NamingConvention = DEFAULT_CONVENTION
) -> None:
    """Run :func:`check_naming`; raises :class:`NamingViolation` on the first failure."""
    error = check_naming(directory, convention)
    if error is not None:
        raise NamingViolation(error)
