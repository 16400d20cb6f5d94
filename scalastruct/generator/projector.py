"""Projection of a single class field onto a Go struct field."""

from .config import MappingConfig
from .errors import FieldError, GenerationError
from .naming import declaration_name, serialization_tag_name
from .resolver import TypeResolver
from .types import Blacklisted, FieldProjection, Mapped, SourceField


def json_tag(field_name: str, resolved: Mapped, config: MappingConfig) -> str:
    """Return the struct tag for a field, omitting absent optional values."""
    options = [serialization_tag_name(field_name, config.boundary_mode)]
    if resolved.is_nilable:
        options.append("omitempty")
    return f'json:"{",".join(options)}"'


class FieldProjector:
    """Combines name normalization and type resolution for one field."""

    def __init__(self, config: MappingConfig, resolver: TypeResolver | None = None) -> None:
        self.config = config
        self.resolver = resolver or TypeResolver(config)

    def project(self, field: SourceField) -> FieldProjection | Blacklisted:
        name = declaration_name(field.name, self.config)
        if self.config.is_blacklisted_field(name):
            return Blacklisted(f"field {name} is blacklisted")

        try:
            resolution = self.resolver.resolve_signature(field.raw_type)
        except GenerationError as err:
            raise FieldError(field.name, err) from err

        if isinstance(resolution, Blacklisted):
            return resolution
        return FieldProjection(
            name=name,
            type=resolution.type,
            tag=json_tag(field.name, resolution, self.config),
        )
