"""Tests for field projection and struct generation."""

import pytest

from scalastruct.generator import ClassRegistry, Generator, GoWriter, MappingConfig
from scalastruct.generator.errors import (
    ClassGenerationError,
    ClassResourceError,
    FieldError,
    MissingMarkerAttributeError,
)
from scalastruct.generator.generator import eligible_fields
from scalastruct.generator.projector import FieldProjector
from scalastruct.generator.types import (
    ACC_FINAL,
    ACC_PRIVATE,
    ACC_PUBLIC,
    ACC_STATIC,
    PRIVATE_FINAL,
    Blacklisted,
    ClassDescriptor,
    FieldProjection,
    SourceField,
)

OPTION_STRING = "Lscala/Option<Ljava/lang/String;>;"


def _field(name, descriptor, signature=None, flags=PRIVATE_FINAL):
    return SourceField(name=name, access_flags=flags, descriptor=descriptor, signature=signature)


def _account(*fields, attributes=("ScalaSig",)):
    return ClassDescriptor(name="com.acme.Account", attributes=list(attributes), fields=list(fields))


def describe_field_projector():
    def projects_name_type_and_tag(expect):
        result = FieldProjector(MappingConfig.build()).project(_field("userId", "J"))

        expect(result) == FieldProjection(name="UserID", type="int64", tag='json:"user_id"')

    def prefers_signature_over_descriptor(expect):
        field = _field(
            "tags",
            "Lscala/collection/immutable/List;",
            "Lscala/collection/immutable/List<Ljava/lang/String;>;",
        )

        expect(FieldProjector(MappingConfig.build()).project(field).type) == "[]string"

    def omits_empty_nilable_values(expect):
        field = _field("nickname", "Lscala/Option;", OPTION_STRING)

        result = FieldProjector(MappingConfig.build()).project(field)

        expect(result.type) == "*string"
        expect(result.tag) == 'json:"nickname,omitempty"'

    def does_not_omit_optional_collections(expect):
        field = _field(
            "tags",
            "Lscala/Option;",
            "Lscala/Option<Lscala/collection/immutable/List<Ljava/lang/String;>;>;",
        )

        expect(FieldProjector(MappingConfig.build()).project(field).tag) == 'json:"tags"'

    def skips_blacklisted_field_names(expect):
        projector = FieldProjector(MappingConfig.build(blacklist_fields=["USERID"]))

        expect(isinstance(projector.project(_field("userId", "J")), Blacklisted)) == True

    def skips_blacklisted_types(expect):
        projector = FieldProjector(MappingConfig.build(blacklist_types=["Lcom/acme/Secret;"]))

        result = projector.project(_field("secret", "Lcom/acme/Secret;"))

        expect(isinstance(result, Blacklisted)) == True

    def wraps_failures_with_field_name(expect):
        projector = FieldProjector(MappingConfig.build())

        with pytest.raises(FieldError) as exc:
            projector.project(_field("secret", "Lcom/acme/Unknown;"))
        expect(exc.value.field_name) == "secret"
        expect("Lcom/acme/Unknown;" in str(exc.value)) == True


def describe_eligible_fields():
    def keeps_private_final_fields_sorted_by_name(expect):
        descriptor = _account(
            _field("zeta", "I"),
            _field("alpha", "I"),
            _field("MODULE$", "Lcom/acme/Account$;", flags=ACC_PUBLIC | ACC_STATIC | ACC_FINAL),
            _field("mutable", "I", flags=ACC_PRIVATE),
            _field("constant", "I", flags=ACC_FINAL),
        )

        expect([f.name for f in eligible_fields(descriptor)]) == ["alpha", "zeta"]


def describe_generator():
    def generates_struct_declaration(expect):
        descriptor = _account(
            _field("userId", "J"),
            _field("nickname", "Lscala/Option;", OPTION_STRING),
            _field("address", "Lcom/acme/Address;"),
        )
        generator = Generator(MappingConfig.build(), ClassRegistry.of(["com.acme.Address"]))

        declaration = generator.generate(descriptor)

        expect(declaration.name) == "Account"
        expect(declaration.class_name) == "com.acme.Account"
        expect(declaration.fields) == (
            FieldProjection(name="Address", type="Address", tag='json:"address"'),
            FieldProjection(name="Nickname", type="*string", tag='json:"nickname,omitempty"'),
            FieldProjection(name="UserID", type="int64", tag='json:"user_id"'),
        )

    def skips_blacklisted_fields_silently(expect):
        descriptor = _account(_field("userId", "J"), _field("password", "Ljava/lang/String;"))
        generator = Generator(MappingConfig.build(blacklist_fields=["Password"]))

        declaration = generator.generate(descriptor)

        expect([f.name for f in declaration.fields]) == ["UserID"]

    def rejects_class_without_marker(expect):
        generator = Generator(MappingConfig.build())

        with pytest.raises(MissingMarkerAttributeError) as exc:
            generator.generate(_account(_field("userId", "J"), attributes=["SourceFile"]))
        expect(exc.value.class_name) == "com.acme.Account"

    def uses_configured_marker(expect):
        generator = Generator(MappingConfig.build(marker_attribute="CaseClass"))

        declaration = generator.generate(_account(_field("userId", "J"), attributes=["CaseClass"]))

        expect(len(declaration.fields)) == 1

    def wraps_field_errors_with_class_name(expect):
        generator = Generator(MappingConfig.build())
        descriptor = _account(_field("userId", "J"), _field("badField", "Lcom/acme/Unknown;"))

        with pytest.raises(ClassGenerationError) as exc:
            generator.generate(descriptor)
        expect(exc.value.class_name) == "com.acme.Account"
        expect("badField" in str(exc.value)) == True
        expect(isinstance(exc.value.__cause__, FieldError)) == True

    def does_not_resolve_unregistered_classes(expect):
        generator = Generator(MappingConfig.build())

        with pytest.raises(ClassGenerationError):
            generator.generate(_account(_field("address", "Lcom/acme/Address;")))


def describe_run():
    def generates_named_classes(expect, source):
        names = ["com.acme.Account", "com.acme.Address"]
        writer = GoWriter()

        report = Generator(MappingConfig.build(), ClassRegistry.of(names)).run(
            source, writer, names
        )

        expect(report.generated) == names
        expect(report.ok) == True
        expect([d.name for d in writer.declarations]) == ["Account", "Address"]
        account = writer.declarations[0]
        expect([f.name for f in account.fields]) == [
            "Address",
            "CreatedAt",
            "DisplayName",
            "Nickname",
            "Tags",
            "UserID",
        ]

    def stops_at_first_failure(expect, source):
        writer = GoWriter()
        generator = Generator(MappingConfig.build(), ClassRegistry.of(source.names()))

        with pytest.raises(MissingMarkerAttributeError):
            generator.run(source, writer)
        expect([d.class_name for d in writer.declarations]) == [
            "com.acme.Account",
            "com.acme.Address",
        ]

    def keeps_going_past_failures(expect, source):
        writer = GoWriter()
        generator = Generator(MappingConfig.build(), ClassRegistry.of(source.names()))

        report = generator.run(source, writer, keep_going=True)

        expect(report.ok) == False
        expect(list(report.failed)) == ["com.acme.Legacy"]
        expect("ScalaSig" in report.failed["com.acme.Legacy"]) == True
        expect(report.generated) == ["com.acme.Account", "com.acme.Address"]
        expect([d.name for d in writer.declarations]) == ["Account", "Address"]

    def reports_missing_classes(expect, source):
        generator = Generator(MappingConfig.build())

        with pytest.raises(ClassResourceError) as exc:
            generator.run(source, GoWriter(), ["com.acme.Missing"])
        expect(exc.value.class_name) == "com.acme.Missing"
