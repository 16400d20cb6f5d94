"""Go source rendering for generated struct declarations."""

import re
from collections.abc import Iterable
from typing import Protocol

from jinja2 import Environment, PackageLoader

from .types import StructDeclaration

env = Environment(
    loader=PackageLoader("scalastruct.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("go.go.j2")

# Package qualifiers and their import paths
IMPORTS = {
    "time": "time",
    "decimal": "github.com/shopspring/decimal",
}

# A package qualifier starts at an identifier boundary: `time.` but not `mytime.`
QUALIFIER_RE = re.compile(r"(?<![\w.])(\w+)\.")


class DeclarationWriter(Protocol):
    """Receives the declarations generated in a run."""

    def write(self, declaration: StructDeclaration) -> None:
        ...


def imports(declarations: Iterable[StructDeclaration]) -> list[str]:
    """Return the sorted import paths used by the declarations."""
    paths = {
        IMPORTS[qualifier]
        for declaration in declarations
        for field in declaration.fields
        for qualifier in QUALIFIER_RE.findall(field.type)
        if qualifier in IMPORTS
    }
    return sorted(paths)


def render(declarations: list[StructDeclaration], package: str = "models") -> str:
    """Render struct declarations to a Go source file."""
    return template.render(
        package=package,
        imports=imports(declarations),
        declarations=declarations,
    )


class GoWriter:
    """Collects declarations and renders them as one Go file."""

    def __init__(self, package: str = "models") -> None:
        self.package = package
        self.declarations: list[StructDeclaration] = []

    def write(self, declaration: StructDeclaration) -> None:
        self.declarations.append(declaration)

    def render(self) -> str:
        return render(self.declarations, package=self.package)
