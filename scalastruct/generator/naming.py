"""Identifier splitting and recasing for Go field names and JSON tags."""

from .config import BoundaryMode, MappingConfig

# Go's common initialisms, as used by golint
COMMON_INITIALISMS = frozenset(
    [
        "ACL",
        "API",
        "ASCII",
        "CPU",
        "CSS",
        "DNS",
        "EOF",
        "GUID",
        "HTML",
        "HTTP",
        "HTTPS",
        "ID",
        "IP",
        "JSON",
        "LHS",
        "QPS",
        "RAM",
        "RHS",
        "RPC",
        "SLA",
        "SMTP",
        "SQL",
        "SSH",
        "TCP",
        "TLS",
        "TTL",
        "UDP",
        "UI",
        "UID",
        "UUID",
        "URI",
        "URL",
        "UTF8",
        "VM",
        "XML",
        "XMPP",
        "XSRF",
        "XSS",
    ]
)


def _is_boundary(prev: str, current: str, mode: BoundaryMode) -> bool:
    if prev.islower() and current.isupper():
        return True
    if mode == BoundaryMode.CASE_ONLY:
        return False
    if prev.isalpha() and current.isnumeric():
        return True
    return prev.isnumeric() and current.isalpha()


def split_boundaries(identifier: str, mode: BoundaryMode = BoundaryMode.STANDARD) -> list[str]:
    """Split an identifier into words.

    >>> split_boundaries("field123Four")
    ['field', '123', 'Four']
    """
    if not identifier:
        return []

    parts: list[str] = []
    current = identifier[0]
    for prev, char in zip(identifier, identifier[1:]):
        if _is_boundary(prev, char, mode):
            parts.append(current)
            current = ""
        current += char
    parts.append(current)
    return parts


def _word_name(word: str, case_overrides: tuple[str, ...]) -> str:
    if word.upper() in COMMON_INITIALISMS:
        name = word.upper()
    else:
        name = word[0].upper() + word[1:]

    # Overrides are applied last and take precedence over initialisms
    lowered = word.lower()
    for override in case_overrides:
        if override.lower() == lowered:
            return override
    return name


def declaration_name(identifier: str, config: MappingConfig) -> str:
    """Return the exported Go field name for a Scala field name."""
    words = split_boundaries(identifier, config.boundary_mode)
    return "".join(_word_name(word, config.case_overrides) for word in words)


def serialization_tag_name(identifier: str, mode: BoundaryMode = BoundaryMode.STANDARD) -> str:
    """Return the snake_case JSON key for a Scala field name."""
    return "_".join(word.lower() for word in split_boundaries(identifier, mode))


def struct_name(class_name: str) -> str:
    """Return the simple name of a fully qualified class name."""
    return class_name.rsplit(".", 1)[-1]
