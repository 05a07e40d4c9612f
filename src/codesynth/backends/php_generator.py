"""
Source text generator for resolved blueprints.

Converts a ResolvedBlueprint (and its members) into formatted class or
interface source text:

    <comment block>
    <modifier> class <Name> extends <Base> implements <I1>, <I2> {
        use <T1>, <T2>;

        <property declarations>

        <method declarations>
    }

Supports three comment modes:
    - MULTILINE: /** ... */ blocks (default)
    - SINGLE_LINE: // per line
    - NONE: no generated comments

Formatting rules:
    - One space around modifiers and keywords
    - No trailing whitespace; blank lines are empty
    - Lines joined with a single "\\n"
    - A node's indentation prefix is applied to every line it produces
"""

from typing import Iterable, List, Optional

from codesynth.comments import property_comment, synthesize, text_comment
from codesynth.errors import InvalidElementKind
from codesynth.language import (
    INDENT,
    NULL,
    AccessModifier,
    CommentMode,
    terminate,
)
from codesynth.model import Blueprint, Comment
from codesynth.resolver import (
    ResolvedBlueprint,
    ResolvedMethod,
    ResolvedProperty,
    resolve,
    resolve_method,
    resolve_property,
)

_QUOTED_NULL = '"null"'


def _normalize_default(value: str) -> str:
    """Rewrite a quoted "null" default to the null keyword."""
    return NULL if value.strip() == _QUOTED_NULL else value


def _indent_lines(lines: Iterable[str], prefix: Optional[str]) -> str:
    """Join lines, prefixing every non-blank one."""
    prefix = prefix or ""
    return "\n".join(f"{prefix}{line}" if line else "" for line in lines)


def render_parameter(param) -> str:
    result = f"{param.type} ${param.name}" if param.type else f"${param.name}"
    if param.default is None:
        return result
    return f"{result} = {_normalize_default(param.default)}"


def render_parameters(params) -> str:
    """
    Render a parameter list for a declaration.

    Required parameters come first and optional ones last; each group
    keeps its insertion order.
    """
    params = list(params)
    required = [p for p in params if not p.is_optional]
    optional = [p for p in params if p.is_optional]
    return ", ".join(render_parameter(p) for p in required + optional)


def render_comment(comment: Comment, indentation: Optional[str] = None) -> str:
    """Render a comment; an empty comment renders as an empty string."""
    if not comment.lines:
        return ""
    if comment.multiline:
        lines = ["/**"] + [f" * {line}" if line else " *" for line in comment.lines] + [" */"]
    else:
        lines = [f"// {line}" if line else "//" for line in comment.lines]
    prefix = indentation if indentation is not None else comment.indentation
    return _indent_lines((line.rstrip() for line in lines), prefix)


def _comment_lines(comment: Comment) -> List[str]:
    text = render_comment(comment, indentation="")
    return text.split("\n") if text else []


def render_method(
    method,
    comments: CommentMode = CommentMode.MULTILINE,
    indent: str = INDENT,
) -> str:
    """
    Render a method declaration.

    Args:
        method: ResolvedMethod, or a Method which is resolved on the fly
        comments: Comment mode
        indent: Indentation unit for body lines

    Returns:
        Method source text, every line carrying the method's indentation
    """
    if not isinstance(method, ResolvedMethod):
        method = resolve_method(method)

    parts: List[str] = []
    if comments is not CommentMode.NONE:
        parts.extend(_comment_lines(synthesize(
            method.description,
            method.params,
            method.return_type,
            method.exceptions,
            multiline=comments is CommentMode.MULTILINE,
        )))

    modifier = AccessModifier.PUBLIC if method.is_interface_method else method.modifier
    static = " static" if method.is_static else ""
    declaration = (
        f"{modifier.value}{static} function {method.name}"
        f"({render_parameters(method.params)})"
    )

    if method.is_interface_method:
        parts.append(f"{declaration};")
    else:
        parts.append(declaration)
        parts.append("{")
        for line in method.lines:
            text = terminate(line.rstrip())
            parts.append(f"{indent}{text}" if text else "")
        parts.append("}")

    return _indent_lines(parts, method.indentation)


def render_property(prop, comments: CommentMode = CommentMode.MULTILINE) -> str:
    """
    Render a property or constant declaration.

    Examples:
        public string $name;
        protected $items = [];
        public const VERSION = "1.0";
    """
    if not isinstance(prop, ResolvedProperty):
        prop = resolve_property(prop)

    parts: List[str] = []
    if comments is not CommentMode.NONE:
        parts.extend(_comment_lines(
            property_comment(prop, multiline=comments is CommentMode.MULTILINE)
        ))

    modifier = prop.modifier.value
    if prop.is_constant:
        declaration = f"{modifier} const {prop.name.upper()}"
        default = prop.default if prop.default is not None else NULL
    else:
        type_part = f" {prop.type}" if prop.type else ""
        declaration = f"{modifier}{type_part} ${prop.name}"
        default = prop.default
    if default is not None:
        declaration += f" = {_normalize_default(default)}"
    parts.append(f"{declaration};")

    return _indent_lines(parts, prop.indentation)


def _declaration(resolved: ResolvedBlueprint) -> str:
    if resolved.is_interface:
        declaration = f"interface {resolved.name}"
        if resolved.interfaces:
            declaration += f" extends {', '.join(resolved.interfaces)}"
        return f"{declaration} {{"

    declaration = f"class {resolved.name}"
    if resolved.modifier:
        declaration = f"{resolved.modifier} {declaration}"
    if resolved.base_class:
        declaration += f" extends {resolved.base_class}"
    if resolved.interfaces:
        declaration += f" implements {', '.join(resolved.interfaces)}"
    return f"{declaration} {{"


def render_class(
    resolved: ResolvedBlueprint,
    comments: CommentMode = CommentMode.MULTILINE,
) -> str:
    """
    Render a resolved blueprint as a class or interface definition.

    Args:
        resolved: Output of resolver.resolve
        comments: Comment mode

    Returns:
        Definition source text (no import section)

    Raises:
        InvalidElementKind: If given an unresolved Blueprint
    """
    if not isinstance(resolved, ResolvedBlueprint):
        raise InvalidElementKind(
            f"{resolved!r} is not a ResolvedBlueprint; call resolve() before rendering"
        )

    lines: List[str] = []
    if comments is not CommentMode.NONE:
        lines.extend(_comment_lines(text_comment(
            resolved.description, multiline=comments is CommentMode.MULTILINE
        )))
    lines.append(_declaration(resolved))

    sections: List[str] = []
    if resolved.traits:
        sections.append(f"{resolved.indent}use {', '.join(resolved.traits)};")
    for prop in resolved.properties:
        sections.append(render_property(prop, comments))
    for method in resolved.methods:
        sections.append(render_method(method, comments, resolved.indent))

    if sections:
        # one blank line between members
        lines.append("\n\n".join(sections))
    lines.append("}")
    return "\n".join(lines)


def render_file(
    resolved: ResolvedBlueprint,
    comments: CommentMode = CommentMode.MULTILINE,
) -> str:
    """Render a complete source file: header, namespace, imports and definition."""
    lines = ["<?php", ""]
    if resolved.namespace:
        lines.extend([f"namespace {resolved.namespace};", ""])
    if resolved.imports:
        lines.extend(f"use {path};" for path in resolved.imports)
        lines.append("")
    lines.append(render_class(resolved, comments))
    return "\n".join(lines) + "\n"


def generate_class(
    blueprint: Blueprint,
    comments: CommentMode = CommentMode.MULTILINE,
    indent: Optional[str] = None,
) -> str:
    """Resolve and render a blueprint in one call."""
    return render_class(resolve(blueprint, indent), comments)


def generate_file(
    blueprint: Blueprint,
    comments: CommentMode = CommentMode.MULTILINE,
    indent: Optional[str] = None,
) -> str:
    return render_file(resolve(blueprint, indent), comments)


def save_class_file(
    blueprint: Blueprint,
    filename: str,
    comments: CommentMode = CommentMode.MULTILINE,
) -> None:
    """
    Generate a source file and save it.

    Args:
        blueprint: Blueprint to render
        filename: Output file path (.php extension recommended)
        comments: Comment mode
    """
    source = generate_file(blueprint, comments=comments)
    with open(filename, 'w') as f:
        f.write(source)


__all__ = [
    "render_parameter",
    "render_parameters",
    "render_comment",
    "render_method",
    "render_property",
    "render_class",
    "render_file",
    "generate_class",
    "generate_file",
    "save_class_file",
]
