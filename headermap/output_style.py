"""Output styles controlling the directory placement of generated files."""

from enum import Enum


class OutputStyle(Enum):
    """Where generated files go below the output directory."""

    PACKAGE = "package"  # the type's package, like javac
    SOURCE = "source"  # the relative directory of the input file
    NONE = "none"  # no relative directory

    @classmethod
    def parse(cls, value: "str | OutputStyle") -> "OutputStyle":
        """Return the style named by ``value`` (case-insensitive)."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for style in cls:
            if style.value == name:
                return style
        choices = ", ".join(s.value for s in cls)
        msg = f"Unknown output style {value!r} (expected one of: {choices})"
        raise ValueError(msg)
