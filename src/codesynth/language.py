"""
Language definitions for generated source text.

Holds the grammar constants shared by the model and the renderers, the
mode enums callers use to configure rendering, and the line classifier
that decides whether a body line needs a statement terminator.

CLASSIFICATION RULES (applied to the trimmed line):
    BLOCK    ends with one of  {  }  :  (
             or starts with ( and ends with )
    COMMENT  starts with  *  /*  #  //   or ends with  */
    EMPTY    nothing left after trimming
    PLAIN    anything else, receives the statement terminator

A block-opening line classified as PLAIN would receive a terminator
after its control-flow token.
"""

from enum import Enum
from typing import Any

from codesynth.errors import InvalidElementKind


NAMESPACE_SEPARATOR = "\\"
CONSTRUCTOR_NAME = "__construct"
INDENT = "    "
STATEMENT_TERMINATOR = ";"
NULL = "null"

_BLOCK_ENDINGS = ("{", "}", ":", "(")
_COMMENT_STARTS = ("*", "/*", "#", "//")
_COMMENT_ENDINGS = ("*/",)


class AccessModifier(Enum):
    """Member visibility."""
    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"

    @classmethod
    def parse(cls, value: "AccessModifier | str | None") -> "AccessModifier":
        """Coerce a modifier name, failing on anything outside the enumeration."""
        if value is None:
            return cls.PUBLIC
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidElementKind(f"{value!r} is not a valid access modifier")


class CommentMode(Enum):
    """How generated comments are rendered."""
    MULTILINE = "multiline"      # /** ... */ blocks
    SINGLE_LINE = "single_line"  # // per line
    NONE = "none"                # omit generated comments


class BlueprintKind(Enum):
    """Top-level definition kinds."""
    CLASS = "class"
    INTERFACE = "interface"


class LineKind(Enum):
    """Classification of a single line of body content."""
    BLOCK = "block"
    COMMENT = "comment"
    PLAIN = "plain"
    EMPTY = "empty"


def is_block(line: str) -> bool:
    """Whether the line opens or closes a block of statements."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed.endswith(_BLOCK_ENDINGS):
        return True
    return trimmed.startswith("(") and trimmed.endswith(")")


def is_comment(line: str) -> bool:
    """Whether the line is (part of) a comment."""
    trimmed = line.strip()
    if not trimmed:
        return False
    return trimmed.startswith(_COMMENT_STARTS) or trimmed.endswith(_COMMENT_ENDINGS)


def classify(line: str) -> LineKind:
    if not line.strip():
        return LineKind.EMPTY
    if is_block(line):
        return LineKind.BLOCK
    if is_comment(line):
        return LineKind.COMMENT
    return LineKind.PLAIN


def needs_terminator(line: str) -> bool:
    return classify(line) is LineKind.PLAIN


def terminate(line: str) -> str:
    """Return the line as it should appear in a body."""
    kind = classify(line)
    if kind is LineKind.EMPTY:
        return ""
    if kind is LineKind.PLAIN:
        return f"{line}{STATEMENT_TERMINATOR}"
    return line


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'


def literal(value: Any) -> str:
    """
    Convert a Python value into literal source text.

    Examples:
        literal(None)            -> null
        literal(True)            -> true
        literal("Hi")            -> "Hi"
        literal([1, "a"])        -> [1, "a"]
        literal({"k": 2})        -> ["k" => 2]
    """
    if value is None:
        return NULL
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(literal(v) for v in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(f"{literal(k)} => {literal(v)}" for k, v in value.items())
        return f"[{items}]"
    raise InvalidElementKind(f"Cannot express {type(value).__name__} as a literal")
