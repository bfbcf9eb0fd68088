"""Violation model: the explicit failure value of a naming check."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class ViolationKind(Enum):
    """Every way a style-sheet file can break the naming convention."""

    PARSE_ERROR = "parse-error"
    TOO_MANY_RULES = "too-many-rules"
    FILENAME_MISMATCH = "filename-mismatch"
    INVALID_NAME = "invalid-name"
    STRUCTURAL_MISMATCH = "structural-mismatch"


@dataclass(frozen=True)
class NamingError:
    """The first naming violation found in a style-sheet tree.

    Attributes:
        kind: Which check failed.
        message: Human-readable description of the problem.
        selector: The offending selector, if one was reached.
        file_path: The file the violation was found in.
        raw_name: The selector without its leading dot, for invalid names.
        line: Source line of the offending node, if known.
        fix: Expected location of the file, if one can be derived.
    """

    kind: ViolationKind
    message: str
    selector: str | None = None
    file_path: str | None = None
    raw_name: str | None = None
    line: int | None = None
    fix: str | None = None

    def with_file(self, file_path: str, line: int | None = None) -> NamingError:
        """Return a copy of this error located in *file_path* (and *line*)."""
        if line is None:
            line = self.line
        return dataclasses.replace(self, file_path=file_path, line=line)

    def __str__(self) -> str:
        if self.file_path is None:
            return self.message
        location = self.file_path
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"in file {location}, details: {self.message}"
