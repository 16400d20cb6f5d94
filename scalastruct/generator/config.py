"""Mapping configuration shared by every class in a generation run."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType

from dataclasses_json import DataClassJsonMixin, LetterCase, config

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_MARKER_ATTRIBUTE = "ScalaSig"


class BoundaryMode(StrEnum):
    """How identifiers are split into words."""

    STANDARD = "standard"  # aB, a1, 1a
    CASE_ONLY = "case-only"  # aB only; legacy behavior


@dataclass(frozen=True)
class MappingConfig:
    """Read-only rules consulted while resolving types and names.

    Override keys are stored lowercased and blacklisted field names are
    compared case-insensitively.
    """

    overrides: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    blacklist_types: frozenset[str] = frozenset()
    blacklist_fields: frozenset[str] = frozenset()
    case_overrides: tuple[str, ...] = ()
    known_type_names: frozenset[str] = frozenset()
    boundary_mode: BoundaryMode = BoundaryMode.STANDARD
    marker_attribute: str = DEFAULT_MARKER_ATTRIBUTE

    @classmethod
    def build(
        cls,
        *,
        overrides: Mapping[str, str] | None = None,
        blacklist_types: Iterable[str] = (),
        blacklist_fields: Iterable[str] = (),
        case_overrides: Iterable[str] = (),
        known_type_names: Iterable[str] = (),
        boundary_mode: BoundaryMode | str = BoundaryMode.STANDARD,
        marker_attribute: str = DEFAULT_MARKER_ATTRIBUTE,
    ) -> "MappingConfig":
        """Create a configuration, normalizing keys for lookup."""
        try:
            mode = BoundaryMode(boundary_mode)
        except ValueError as err:
            raise ConfigError(f"unknown boundary mode {boundary_mode!r}") from err

        return cls(
            overrides=MappingProxyType({k.lower(): v for k, v in (overrides or {}).items()}),
            blacklist_types=frozenset(blacklist_types),
            blacklist_fields=frozenset(name.lower() for name in blacklist_fields),
            case_overrides=tuple(case_overrides),
            known_type_names=frozenset(known_type_names),
            boundary_mode=mode,
            marker_attribute=marker_attribute,
        )

    def is_blacklisted_field(self, name: str) -> bool:
        return name.lower() in self.blacklist_fields

    def with_known_types(self, names: Iterable[str]) -> "MappingConfig":
        return replace(self, known_type_names=frozenset(names))

    def extend(
        self,
        *,
        blacklist_types: Iterable[str] = (),
        blacklist_fields: Iterable[str] = (),
        case_overrides: Iterable[str] = (),
    ) -> "MappingConfig":
        """Return a copy with additional blacklist and case-override entries."""
        return replace(
            self,
            blacklist_types=self.blacklist_types | frozenset(blacklist_types),
            blacklist_fields=self.blacklist_fields
            | frozenset(name.lower() for name in blacklist_fields),
            case_overrides=self.case_overrides + tuple(case_overrides),
        )


@dataclass
class ConfigFile(DataClassJsonMixin):
    """On-disk configuration, using camelCase keys."""

    dataclass_json_config = config(letter_case=LetterCase.CAMEL)["dataclasses_json"]

    overrides: dict[str, str] = field(default_factory=dict)
    blacklist_types: list[str] = field(default_factory=list)
    blacklist_fields: list[str] = field(default_factory=list)
    case_overrides: list[str] = field(default_factory=list)
    boundary_mode: str = BoundaryMode.STANDARD.value
    marker_attribute: str = DEFAULT_MARKER_ATTRIBUTE

    def to_mapping_config(self) -> MappingConfig:
        return MappingConfig.build(
            overrides=self.overrides,
            blacklist_types=self.blacklist_types,
            blacklist_fields=self.blacklist_fields,
            case_overrides=self.case_overrides,
            boundary_mode=self.boundary_mode,
            marker_attribute=self.marker_attribute,
        )


def load_config(path: str | Path) -> MappingConfig:
    """Load a JSON configuration file."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as err:
        raise ConfigError(f"unable to read config {path}: {err}") from err

    try:
        config_file = ConfigFile.from_json(text)
    except (AttributeError, KeyError, TypeError, ValueError) as err:
        raise ConfigError(f"invalid config {path}: {err}") from err

    mapping_config = config_file.to_mapping_config()
    logger.debug(
        "loaded config %s: %d overrides, %d blacklisted types, %d blacklisted fields",
        path,
        len(mapping_config.overrides),
        len(mapping_config.blacklist_types),
        len(mapping_config.blacklist_fields),
    )
    return mapping_config
