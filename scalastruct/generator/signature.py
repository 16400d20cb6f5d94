"""Recursive-descent parser for JVM field type signatures.

Only the subset used by Scala case-class fields is understood: primitive
codes, ``L<name>;`` references and parametrized references of the form
``L<name><...>;`` nested to any depth.
"""

from .errors import MalformedSignatureError
from .types import PRIMITIVE_CODES, GenericNode


class SignatureParser:
    """Parses one signature string into a GenericNode tree.

    Every recursive call works on a bounded ``[start, end)`` slice of the
    original string so positions in error messages refer to the input.
    """

    def __init__(self, signature: str) -> None:
        self.signature = signature

    def parse(self) -> GenericNode:
        return self._parse_type(0, len(self.signature))

    def _fail(self, reason: str) -> MalformedSignatureError:
        return MalformedSignatureError(self.signature, reason)

    def _parse_type(self, start: int, end: int) -> GenericNode:
        if start >= end:
            raise self._fail(f"empty type at position {start}")

        open_pos = self.signature.find("<", start, end)
        if open_pos < 0:
            leaf = self.signature[start:end]
            if ">" in leaf:
                raise self._fail(f"unmatched '>' in {leaf!r}")
            return GenericNode(token=leaf)

        close_pos = end - 2
        if close_pos <= open_pos or self.signature[close_pos:end] != ">;":
            raise self._fail(f"missing closing '>;' for '<' at position {open_pos}")

        token = self.signature[start : open_pos + 1] + ">;"
        children = self._parse_arguments(open_pos + 1, close_pos)
        return GenericNode(token=token, children=tuple(children))

    def _parse_arguments(self, start: int, end: int) -> list[GenericNode]:
        """Split ``[start, end)`` on depth-0 semicolons and parse each part."""
        children: list[GenericNode] = []
        depth = 0
        child_start = start
        pos = start

        while pos < end:
            char = self.signature[pos]

            # Primitive codes are complete tokens without a terminating ';'
            if pos == child_start and char in PRIMITIVE_CODES:
                children.append(GenericNode(token=char))
                pos += 1
                child_start = pos
                continue

            if char == "<":
                depth += 1
            elif char == ">":
                depth -= 1
                if depth < 0:
                    raise self._fail(f"unbalanced '>' at position {pos}")
            elif char == ";" and depth == 0:
                children.append(self._parse_type(child_start, pos + 1))
                child_start = pos + 1
            pos += 1

        if depth != 0:
            raise self._fail(f"unbalanced '<' in type parameters at position {start}")
        if child_start != end:
            raise self._fail(
                f"truncated type parameter {self.signature[child_start:end]!r} "
                f"at position {child_start}"
            )
        if not children:
            raise self._fail(f"empty type parameter list at position {start}")
        return children


def parse(signature: str) -> GenericNode:
    """Parse a field descriptor or generic signature into a type tree."""
    return SignatureParser(signature).parse()
