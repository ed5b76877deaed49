"""Data models describing the types and units handed to the resolver."""

import re
from dataclasses import dataclass

# Balanced generic argument lists are stripped innermost first.
GENERIC_ARGS_RE = re.compile(r"<[^<>]*>")


def erase_type_name(name: str) -> str:
    """Strip generic type arguments: ``java.util.Map<K, List<V>>`` -> ``java.util.Map``."""
    erased = name.strip()
    while True:
        stripped = GENERIC_ARGS_RE.sub("", erased)
        if stripped == erased:
            return stripped
        erased = stripped


@dataclass(frozen=True)
class TypeIdentifier:
    """A translated type as seen by header resolution.

    ``package`` is None when the type has no package element at all and the
    empty string for the unnamed package.
    """

    qualified_name: str
    simple_name: str
    package: str | None

    @classmethod
    def from_qualified_name(
        cls, name: str, package: str | None = None
    ) -> "TypeIdentifier":
        """Build an identifier from a dotted, possibly generic, type name.

        When ``package`` is not given it is taken to be everything before the
        last dot, which is wrong for nested types; pass it explicitly there.
        """
        qualified = erase_type_name(name)
        if package is None:
            package, _, simple = qualified.rpartition(".")
        elif package and qualified.startswith(package + "."):
            simple = qualified[len(package) + 1 :].rpartition(".")[2]
        else:
            simple = qualified.rpartition(".")[2]
        return cls(qualified_name=qualified, simple_name=simple, package=package)


@dataclass(frozen=True)
class CompilationUnitDescriptor:
    """One translated input, identified by its package and main type."""

    package: str | None
    main_type_name: str
