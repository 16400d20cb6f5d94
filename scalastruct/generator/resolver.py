"""Resolution of parsed JVM type signatures to Go types.

Resolution walks the tree bottom-up and hands every node to an ordered list
of rules; the first rule that matches decides the node's Go type:

1. user overrides
2. blacklisted types
3. ``scala.Option`` unwrapping
4. built-in types
5. classes generated in the same run
"""

import logging
from collections.abc import Sequence

from .config import MappingConfig
from .errors import UnmappableTypeError
from .naming import struct_name
from .signature import parse
from .types import Blacklisted, GenericNode, Mapped, Resolution

logger = logging.getLogger(__name__)

PLACEHOLDER = "%s"

OPTION_TOKEN = "Lscala/Option<>;"

BUILTIN_TYPES: dict[str, str] = {
    "Lscala/collection/immutable/List<>;": "[]%s",
    "Lscala/collection/immutable/Map<>;": "map[%s]%s",
    "Lscala/collection/immutable/Set<>;": "[]%s",
    "Lscala/collection/Seq<>;": "[]%s",
    # Primitive descriptors
    "B": "int8",
    "D": "float64",
    "F": "float32",
    "I": "int",
    "J": "int64",
    "S": "int16",
    "Z": "bool",
    # Scala erases generic Int parameters to Object
    "Ljava/lang/Object;": "int",
    "Ljava/lang/String;": "string",
    "Ljava/sql/Date;": "time.Time",
    "Ljava/sql/Timestamp;": "time.Time",
    "Lorg/joda/time/DateTime;": "time.Time",
    "Lorg/joda/time/LocalDate;": "time.Time",
    "Lscala/Enumeration$Value;": "string",
    "Lscala/math/BigDecimal;": "decimal.Decimal",
}


def fill_template(template: str, children: Sequence[str], token: str) -> str:
    """Substitute resolved type parameters into ``%s`` placeholders, in order."""
    parts = template.split(PLACEHOLDER)
    if len(parts) - 1 != len(children):
        raise UnmappableTypeError(
            token,
            f"template {template!r} expects {len(parts) - 1} type parameters, "
            f"got {len(children)}",
        )
    return parts[0] + "".join(child + part for child, part in zip(children, parts[1:]))


def class_name_of(token: str) -> str | None:
    """Return the dotted class name of an ``L<name>;`` reference token."""
    if not (token.startswith("L") and token.endswith(";")):
        return None
    return token[1:-1].replace("/", ".")


class Rule:
    """A matcher paired with the resolution it produces."""

    name = "rule"

    def matches(self, node: GenericNode, config: MappingConfig) -> bool:
        raise NotImplementedError

    def resolve(self, node: GenericNode, children: list[str], config: MappingConfig) -> Resolution:
        raise NotImplementedError


class OverrideRule(Rule):
    """User-supplied templates keyed by lowercased raw token."""

    name = "override"

    def matches(self, node: GenericNode, config: MappingConfig) -> bool:
        return node.token.lower() in config.overrides

    def resolve(self, node: GenericNode, children: list[str], config: MappingConfig) -> Resolution:
        template = config.overrides[node.token.lower()]
        if PLACEHOLDER not in template:
            return Mapped(template)
        return Mapped(fill_template(template, children, node.token))


class BlacklistRule(Rule):
    name = "blacklist"

    def matches(self, node: GenericNode, config: MappingConfig) -> bool:
        return node.token in config.blacklist_types

    def resolve(self, node: GenericNode, children: list[str], config: MappingConfig) -> Resolution:
        return Blacklisted(f"type {node.token} is blacklisted")


class OptionRule(Rule):
    """``scala.Option`` becomes a pointer, except around slices and maps.

    An absent collection is represented as an empty one.
    """

    name = "option"

    def matches(self, node: GenericNode, config: MappingConfig) -> bool:
        return node.token == OPTION_TOKEN

    def resolve(self, node: GenericNode, children: list[str], config: MappingConfig) -> Resolution:
        if len(children) != 1:
            raise UnmappableTypeError(node.token, "scala.Option requires 1 generic parameter")
        child = Mapped(children[0])
        if child.is_collection:
            return child
        return Mapped("*" + child.type)


class BuiltinRule(Rule):
    name = "builtin"

    def __init__(self, table: dict[str, str] | None = None) -> None:
        self.table = BUILTIN_TYPES if table is None else table

    def matches(self, node: GenericNode, config: MappingConfig) -> bool:
        return node.token in self.table

    def resolve(self, node: GenericNode, children: list[str], config: MappingConfig) -> Resolution:
        return Mapped(fill_template(self.table[node.token], children, node.token))


class KnownClassRule(Rule):
    """References to classes generated in the same run."""

    name = "known-class"

    def matches(self, node: GenericNode, config: MappingConfig) -> bool:
        return class_name_of(node.token) in config.known_type_names

    def resolve(self, node: GenericNode, children: list[str], config: MappingConfig) -> Resolution:
        return Mapped(struct_name(node.token[1:-1].replace("/", ".")))


DEFAULT_RULES: tuple[Rule, ...] = (
    OverrideRule(),
    BlacklistRule(),
    OptionRule(),
    BuiltinRule(),
    KnownClassRule(),
)


class TypeResolver:
    """Resolves type trees against a mapping configuration."""

    def __init__(self, config: MappingConfig, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        self.config = config
        self.rules = tuple(rules)

    def resolve(self, node: GenericNode) -> Resolution:
        children: list[str] = []
        for child in node.children:
            resolution = self.resolve(child)
            if isinstance(resolution, Blacklisted):
                return resolution
            children.append(resolution.type)

        for rule in self.rules:
            if rule.matches(node, self.config):
                resolution = rule.resolve(node, children, self.config)
                logger.debug("%s resolved by %s rule to %s", node.token, rule.name, resolution)
                return resolution

        raise UnmappableTypeError(node.token)

    def resolve_signature(self, signature: str) -> Resolution:
        return self.resolve(parse(signature))


def resolve(node: GenericNode, config: MappingConfig) -> Resolution:
    """Resolve a parsed type tree to a Go type."""
    return TypeResolver(config).resolve(node)


def resolve_signature(signature: str, config: MappingConfig) -> Resolution:
    """Parse and resolve a raw descriptor or generic signature."""
    return TypeResolver(config).resolve_signature(signature)
