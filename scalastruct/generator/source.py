"""Class descriptor sources and the registry of classes in a run."""

import logging
from collections.abc import Iterable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import ClassResourceError
from .types import ClassDescriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_SUFFIX = ".json"


class ClassSource(Protocol):
    """Supplies decoded classes by fully qualified name."""

    def names(self) -> list[str]:
        ...

    def open(self, name: str) -> AbstractContextManager[ClassDescriptor]:
        ...


@dataclass(frozen=True)
class ClassRegistry:
    """Fully qualified names of the classes generated together."""

    names: frozenset[str]

    @classmethod
    def of(cls, names: Iterable[str]) -> "ClassRegistry":
        return cls(names=frozenset(names))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)


class DirectorySource:
    """Reads class descriptors laid out like class files in a jar.

    ``com/acme/Account.json`` describes the class ``com.acme.Account``.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root.joinpath(*name.split(".")).with_suffix(DESCRIPTOR_SUFFIX)

    def names(self) -> list[str]:
        if not self.root.is_dir():
            raise ClassResourceError(str(self.root), str(self.root), NotADirectoryError(self.root))
        names = [
            ".".join(path.relative_to(self.root).with_suffix("").parts)
            for path in self.root.rglob(f"*{DESCRIPTOR_SUFFIX}")
        ]
        return sorted(names)

    @contextmanager
    def open(self, name: str) -> Iterator[ClassDescriptor]:
        path = self.path_for(name)
        try:
            f = open(path, encoding="utf-8")
        except OSError as err:
            raise ClassResourceError(name, str(path), err) from err

        with f:
            try:
                descriptor = ClassDescriptor.from_json(f.read())
            except (AttributeError, KeyError, TypeError, ValueError) as err:
                raise ClassResourceError(name, str(path), err) from err
            if descriptor.name != name:
                raise ClassResourceError(
                    name, str(path), ValueError(f"descriptor is for {descriptor.name}")
                )
            logger.debug("opened %s (%d fields)", path, len(descriptor.fields))
            yield descriptor
