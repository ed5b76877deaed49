"""Reading and writing the properties-style header mapping format.

Follows the java.util.Properties text conventions: ``key=value``,
``key:value`` or ``key value`` entries, ``#``/``!`` comment lines, backslash
line continuations and ``\\t``, ``\\n``, ``\\uXXXX`` style escapes.
"""

import re

NEWLINE_RE = re.compile(r"\r\n|\r|\n")
ESCAPE_RE = re.compile(r"\\(u[0-9A-Fa-f]{4}|u|.)", re.DOTALL)

WHITESPACE = " \t\f"
SEPARATORS = "=:"

UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


def parse_properties(text: str) -> list[tuple[str, str]]:
    """Parse properties text into ``(key, value)`` pairs in file order.

    Duplicate keys are kept; callers merging into a dict get last-write-wins.
    Raises ValueError on a malformed ``\\uXXXX`` escape.
    """
    return [_split_entry(line) for line in _logical_lines(text)]


def format_property(key: str, value: str) -> str:
    """Format one entry as a ``key=value`` line that parses back unchanged."""
    return f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}"


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    buffer = ""
    continuing = False
    for raw in NEWLINE_RE.split(text):
        line = raw.lstrip(WHITESPACE)
        if not continuing and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            buffer += line[:-1]
            continuing = True
            continue
        lines.append(buffer + line)
        buffer = ""
        continuing = False
    if continuing and buffer:
        lines.append(buffer)
    return lines


def _split_entry(line: str) -> tuple[str, str]:
    key_end = value_start = len(line)
    i = 0
    while i < len(line):
        c = line[i]
        if c == "\\":
            i += 2
            continue
        if c in SEPARATORS:
            key_end, value_start = i, i + 1
            break
        if c in WHITESPACE:
            key_end = i
            j = i
            while j < len(line) and line[j] in WHITESPACE:
                j += 1
            if j < len(line) and line[j] in SEPARATORS:
                j += 1
            value_start = j
            break
        i += 1
    key = line[:key_end]
    value = line[value_start:].lstrip(WHITESPACE)
    return _unescape(key), _unescape(value)


def _unescape(s: str) -> str:
    def replace(m: re.Match[str]) -> str:
        token = m.group(1)
        if token == "u":
            msg = f"Malformed \\uxxxx encoding in {s!r}"
            raise ValueError(msg)
        if len(token) == 5:  # noqa: PLR2004
            return chr(int(token[1:], 16))
        return UNESCAPES.get(token, token)

    # Escaped surrogate pairs (as written by native2ascii) become one code point.
    unescaped = ESCAPE_RE.sub(replace, s)
    return unescaped.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def _escape(s: str, *, is_key: bool) -> str:
    out = []
    for i, c in enumerate(s):
        if c in ESCAPES:
            out.append(ESCAPES[c])
        elif "\ud800" <= c <= "\udfff":
            # Lone surrogates cannot be encoded as UTF-8.
            out.append(f"\\u{ord(c):04X}")
        elif is_key and c in WHITESPACE + SEPARATORS:
            out.append("\\" + c)
        elif i == 0 and (c in WHITESPACE or (is_key and c in "#!")):
            out.append("\\" + c)
        else:
            out.append(c)
    return "".join(out)
