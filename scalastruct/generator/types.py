"""Type definitions for signature parsing and struct generation."""

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, LetterCase, config

__all__ = [
    "ACC_FINAL",
    "ACC_PRIVATE",
    "ACC_PROTECTED",
    "ACC_PUBLIC",
    "ACC_STATIC",
    "PRIVATE_FINAL",
    "Blacklisted",
    "ClassDescriptor",
    "FieldProjection",
    "GenericNode",
    "Mapped",
    "Resolution",
    "SourceField",
    "StructDeclaration",
]

# JVM field access flags
ACC_PUBLIC = 0x0001
ACC_PRIVATE = 0x0002
ACC_PROTECTED = 0x0004
ACC_STATIC = 0x0008
ACC_FINAL = 0x0010

# Case class constructor parameters compile to private final fields
PRIVATE_FINAL = ACC_PRIVATE | ACC_FINAL

PRIMITIVE_CODES = frozenset("BCDFIJSZ")

PARAMETRIZED_MARKER = "<>;"


@dataclass(frozen=True, slots=True)
class GenericNode:
    """A parsed type signature.

    The token of a parametrized node is its raw prefix with the parameters
    removed (``Lscala/Option<>;``); its children are the type parameters in
    declaration order. Leaf tokens are primitive codes or ``L<name>;``.
    """

    token: str
    children: tuple["GenericNode", ...] = ()

    @property
    def is_parametrized(self) -> bool:
        return self.token.endswith(PARAMETRIZED_MARKER)

    def signature(self) -> str:
        """Re-serialize this tree to a signature string."""
        if not self.is_parametrized:
            return self.token
        inner = "".join(child.signature() for child in self.children)
        return f"{self.token[:-2]}{inner}>;"


@dataclass(frozen=True, slots=True)
class Mapped:
    """A node that resolved to a Go type."""

    type: str

    @property
    def is_nilable(self) -> bool:
        return self.type.startswith("*")

    @property
    def is_collection(self) -> bool:
        return self.type.startswith("[]") or self.type.startswith("map[")


@dataclass(frozen=True, slots=True)
class Blacklisted:
    """A field or type that was intentionally omitted."""

    reason: str


Resolution = Mapped | Blacklisted


@dataclass
class SourceField(DataClassJsonMixin):
    """A field as decoded from a compiled class.

    When present, the generic signature supersedes the descriptor.
    """

    dataclass_json_config = config(letter_case=LetterCase.CAMEL)["dataclasses_json"]

    name: str
    access_flags: int
    descriptor: str
    signature: str | None = None

    @property
    def raw_type(self) -> str:
        return self.signature if self.signature is not None else self.descriptor

    def has_flags(self, flags: int) -> bool:
        return self.access_flags & flags == flags


@dataclass
class ClassDescriptor(DataClassJsonMixin):
    """A compiled class: its attribute names and its fields."""

    dataclass_json_config = config(letter_case=LetterCase.CAMEL)["dataclasses_json"]

    name: str
    attributes: list[str] = field(default_factory=list)
    fields: list[SourceField] = field(default_factory=list)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes


@dataclass(frozen=True)
class FieldProjection:
    """A generated struct field."""

    name: str
    type: str
    tag: str


@dataclass(frozen=True)
class StructDeclaration:
    """A generated struct for one class."""

    name: str
    class_name: str
    fields: tuple[FieldProjection, ...]
