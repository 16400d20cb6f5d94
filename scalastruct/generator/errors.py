"""Exceptions raised while generating struct declarations."""


class GenerationError(RuntimeError):
    """Base class for fatal generation errors."""


class ConfigError(GenerationError):
    """Raised when the mapping configuration cannot be loaded."""


class MalformedSignatureError(GenerationError):
    """Raised when a type signature does not parse."""

    def __init__(self, signature: str, reason: str) -> None:
        super().__init__(f"malformed signature {signature!r}: {reason}")
        self.signature = signature
        self.reason = reason


class UnmappableTypeError(GenerationError):
    """Raised when no rule maps a raw type token."""

    def __init__(self, token: str, reason: str | None = None) -> None:
        message = f"unable to map type {token}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.token = token


class FieldError(GenerationError):
    """Wraps a failure with the name of the field being projected."""

    def __init__(self, field_name: str, cause: Exception) -> None:
        super().__init__(f"unable to handle field {field_name}: {cause}")
        self.field_name = field_name


class MissingMarkerAttributeError(GenerationError):
    """Raised when a class lacks the attribute that marks it as eligible."""

    def __init__(self, class_name: str, marker: str) -> None:
        super().__init__(f"class {class_name} does not have a {marker} attribute")
        self.class_name = class_name
        self.marker = marker


class ClassResourceError(GenerationError):
    """Raised when a class descriptor cannot be opened or decoded."""

    def __init__(self, class_name: str, path: str, cause: Exception) -> None:
        super().__init__(f"unable to read class {class_name} from {path}: {cause}")
        self.class_name = class_name
        self.path = path


class ClassGenerationError(GenerationError):
    """Wraps a failure with the name of the class being generated."""

    def __init__(self, class_name: str, cause: Exception) -> None:
        super().__init__(f"unable to generate {class_name}: {cause}")
        self.class_name = class_name
