"""Generation of struct declarations for a set of classes."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .config import MappingConfig
from .errors import ClassGenerationError, GenerationError, MissingMarkerAttributeError
from .naming import struct_name
from .projector import FieldProjector
from .source import ClassRegistry, ClassSource
from .types import PRIVATE_FINAL, Blacklisted, ClassDescriptor, SourceField, StructDeclaration
from .writer import DeclarationWriter

logger = logging.getLogger(__name__)


@dataclass
class RunReport:
    """Outcome of a generation run."""

    generated: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def eligible_fields(descriptor: ClassDescriptor) -> list[SourceField]:
    """Private final fields, sorted by name."""
    fields = [f for f in descriptor.fields if f.has_flags(PRIVATE_FINAL)]
    return sorted(fields, key=lambda f: f.name)


class Generator:
    """Turns class descriptors into struct declarations."""

    def __init__(self, config: MappingConfig, registry: ClassRegistry | None = None) -> None:
        if registry is not None:
            config = config.with_known_types(registry.names)
        self.config = config
        self.projector = FieldProjector(config)

    def generate(self, descriptor: ClassDescriptor) -> StructDeclaration:
        """Project every eligible field of a class.

        Nothing is returned for a class that fails, so a failing class never
        produces partial output.
        """
        if not descriptor.has_attribute(self.config.marker_attribute):
            raise MissingMarkerAttributeError(descriptor.name, self.config.marker_attribute)

        projections = []
        for source_field in eligible_fields(descriptor):
            try:
                result = self.projector.project(source_field)
            except GenerationError as err:
                raise ClassGenerationError(descriptor.name, err) from err
            if isinstance(result, Blacklisted):
                logger.debug("skipping %s.%s: %s", descriptor.name, source_field.name, result.reason)
                continue
            projections.append(result)

        return StructDeclaration(
            name=struct_name(descriptor.name),
            class_name=descriptor.name,
            fields=tuple(projections),
        )

    def run(
        self,
        source: ClassSource,
        writer: DeclarationWriter,
        names: Iterable[str] | None = None,
        *,
        keep_going: bool = False,
    ) -> RunReport:
        """Generate every named class from ``source`` into ``writer``.

        The first failure is raised unless ``keep_going`` is set, in which
        case failing classes are logged, recorded and skipped.
        """
        report = RunReport()
        for name in source.names() if names is None else names:
            try:
                with source.open(name) as descriptor:
                    declaration = self.generate(descriptor)
            except GenerationError as err:
                if not keep_going:
                    raise
                logger.warning("skipping class %s: %s", name, err)
                report.failed[name] = str(err)
                continue

            writer.write(declaration)
            report.generated.append(name)
        return report
