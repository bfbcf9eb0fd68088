"""Naming convention settings: BEM scheme, file suffix and directory layout."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NamingScheme:
    """Delimiters and word pattern of a BEM naming flavour."""

    elem_delim: str = "__"
    mod_delim: str = "_"
    mod_val_delim: str = "_"
    word_pattern: str = r"[a-z0-9]+(?:-[a-z0-9]+)*"


# Preset schemes
PRESET_SCHEMES = {
    "origin": NamingScheme(),
    "two-dashes": NamingScheme(mod_delim="--", mod_val_delim="_"),
}


def get_scheme(name: str) -> NamingScheme:
    """Look up a preset scheme by name."""
    try:
        return PRESET_SCHEMES[name]
    except KeyError:
        raise KeyError(
            f"Unknown naming preset {name!r}; use one of: {', '.join(sorted(PRESET_SCHEMES))}"
        ) from None


@dataclass(frozen=True)
class NamingConvention:
    """Everything a naming check needs to know about the project layout."""

    scheme: NamingScheme = field(default_factory=NamingScheme)
    suffix: str = ".post.css"
    elem_dir_prefix: str = "__"
    mod_dir_prefix: str = "_"

    def __post_init__(self) -> None:
        if not self.suffix:
            raise ValueError("NamingConvention suffix must be a non-empty string")

    @classmethod
    def from_preset(cls, preset: str = "origin", suffix: str = ".post.css") -> NamingConvention:
        return cls(scheme=get_scheme(preset), suffix=suffix)


DEFAULT_CONVENTION = NamingConvention()
