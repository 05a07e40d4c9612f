"""
Comment synthesizer.

Builds the descriptive comment attached to a member from free text plus
annotation lines inferred from the member itself:

    <description lines>
    <blank separator>            (only when a description was given)
    @param <type|mixed> <name>   (one per parameter, declaration order)
    @throws <ShortName>          (one per declared exception)
    @return <type>               (when a return type is set)
"""

from typing import Iterable, Optional, Sequence

from codesynth.imports import ImportSet
from codesynth.model import Comment, Parameter, Property, ReturnType

MIXED = "mixed"


def synthesize(
    description: Iterable[str] = (),
    parameters: Sequence[Parameter] = (),
    return_type: ReturnType = None,
    exceptions: Iterable[str] = (),
    multiline: bool = True,
    imports: Optional[ImportSet] = None,
    indentation: Optional[str] = None,
) -> Comment:
    """
    Build a method comment.

    Args:
        description: Caller supplied text lines
        parameters: Parameters, anything exposing `name` and `type`
        return_type: SingleType, UnionType or None
        exceptions: Exception names; qualified paths are registered with
            `imports` and rendered by short name
        multiline: Build a /** */ block rather than // lines
        imports: Import set receiving qualified exception paths
        indentation: Prefix applied to every physical line when rendered

    Returns:
        Comment (empty when there is nothing to say)
    """
    imports = imports if imports is not None else ImportSet()
    lines = [line for line in description]
    if lines:
        lines.append("")
    for param in parameters:
        lines.append(f"@param {param.type or MIXED} {param.name}")
    for name in exceptions:
        lines.append(f"@throws {imports.register(name)}")
    if return_type is not None:
        lines.append(f"@return {return_type}")
    return Comment(lines=tuple(lines), multiline=multiline, indentation=indentation)


def property_comment(
    prop: Property,
    multiline: bool = True,
    indentation: Optional[str] = None,
) -> Comment:
    """Build a property comment; typed properties get a trailing @var line."""
    lines = list(prop.description)
    if lines and prop.type and not prop.is_constant:
        lines.extend(["", f"@var {prop.type}"])
    return Comment(lines=tuple(lines), multiline=multiline, indentation=indentation)


def text_comment(
    description: Iterable[str],
    multiline: bool = True,
    indentation: Optional[str] = None,
) -> Comment:
    """Plain descriptive comment, as used for the leading class comment."""
    return Comment(lines=tuple(description), multiline=multiline, indentation=indentation)
