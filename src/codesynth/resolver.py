"""
Blueprint resolution (first half of the resolve -> render pipeline).

`resolve` walks a Blueprint and produces an immutable snapshot in which
every fully-qualified type reference is replaced by its short name and
the corresponding paths are collected into the snapshot's import tuple.
Indentation is threaded top-down here, before anything is rendered.

IMPORTANT:
    Resolution never mutates its input. Resolving the same blueprint
    twice, or resolving an already resolved snapshot, yields equal
    snapshots: short names carry no separator and pass through unchanged,
    and the import set never records a path twice.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from codesynth.imports import ImportSet
from codesynth.language import INDENT, AccessModifier, BlueprintKind
from codesynth.model import ReturnType, SingleType, UnionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedParameter:
    name: str
    type: Optional[str] = None
    default: Optional[str] = None
    optional: bool = False

    @property
    def is_optional(self) -> bool:
        return self.optional or self.default is not None


@dataclass(frozen=True)
class ResolvedMethod:
    name: str
    params: Tuple[ResolvedParameter, ...] = ()
    return_type: ReturnType = None
    modifier: AccessModifier = AccessModifier.PUBLIC
    description: Tuple[str, ...] = ()
    exceptions: Tuple[str, ...] = ()
    is_static: bool = False
    is_interface_method: bool = False
    lines: Tuple[str, ...] = ()
    indentation: Optional[str] = None


@dataclass(frozen=True)
class ResolvedProperty:
    name: str
    type: Optional[str] = None
    modifier: AccessModifier = AccessModifier.PUBLIC
    default: Optional[str] = None
    description: Tuple[str, ...] = ()
    is_constant: bool = False
    indentation: Optional[str] = None


@dataclass(frozen=True)
class ResolvedBlueprint:
    """
    Immutable, render-ready view of a Blueprint.

    Properties:
        imports: Every fully-qualified path the definition depends on,
            in first-seen order
        indent: Indentation unit threaded to members and method bodies
    """

    name: str
    kind: BlueprintKind = BlueprintKind.CLASS
    namespace: Optional[str] = None
    base_class: Optional[str] = None
    modifier: Optional[str] = None
    description: Tuple[str, ...] = ()
    interfaces: Tuple[str, ...] = ()
    traits: Tuple[str, ...] = ()
    imports: Tuple[str, ...] = ()
    methods: Tuple[ResolvedMethod, ...] = ()
    properties: Tuple[ResolvedProperty, ...] = ()
    indent: str = INDENT

    @property
    def is_interface(self) -> bool:
        return self.kind is BlueprintKind.INTERFACE


def _resolve_return_type(return_type: ReturnType, imports: ImportSet) -> ReturnType:
    if return_type is None:
        return None
    if isinstance(return_type, UnionType):
        return UnionType(tuple(imports.register(n) for n in return_type.types))
    return SingleType(imports.register(return_type.name))


def _register_all(names: Iterable[str], imports: ImportSet) -> Tuple[str, ...]:
    return tuple(imports.register(name) for name in names)


def resolve_method(
    method: Any,
    imports: Optional[ImportSet] = None,
    indentation: Optional[str] = None,
    interface: bool = False,
) -> ResolvedMethod:
    """
    Resolve one method against an import set.

    Args:
        method: Method (or ResolvedMethod)
        imports: Import set receiving qualified paths; a throwaway set
            is used when omitted
        indentation: Overrides the method's own indentation
        interface: Force signature-only rendering
    """
    imports = imports if imports is not None else ImportSet()
    params = tuple(
        ResolvedParameter(
            name=p.name,
            type=imports.register(p.type) if p.type else None,
            default=p.default,
            optional=p.optional,
        )
        for p in method.params
    )
    return ResolvedMethod(
        name=method.name,
        params=params,
        return_type=_resolve_return_type(method.return_type, imports),
        modifier=method.modifier,
        description=tuple(method.description),
        exceptions=_register_all(method.exceptions, imports),
        is_static=method.is_static,
        is_interface_method=method.is_interface_method or interface,
        lines=tuple(method.lines),
        indentation=indentation if indentation is not None else method.indentation,
    )


def resolve_property(
    prop: Any,
    imports: Optional[ImportSet] = None,
    indentation: Optional[str] = None,
) -> ResolvedProperty:
    imports = imports if imports is not None else ImportSet()
    return ResolvedProperty(
        name=prop.name,
        type=imports.register(prop.type) if prop.type else None,
        modifier=prop.modifier,
        default=prop.default,
        description=tuple(prop.description),
        is_constant=prop.is_constant,
        indentation=indentation if indentation is not None else prop.indentation,
    )


def resolve(model: Any, indent: Optional[str] = None) -> ResolvedBlueprint:
    """
    Resolve a Blueprint (or an already resolved snapshot).

    Args:
        model: Blueprint or ResolvedBlueprint
        indent: Indentation unit for members; defaults to the snapshot's
            own unit, or INDENT for a Blueprint

    Returns:
        ResolvedBlueprint
    """
    if indent is None:
        indent = getattr(model, "indent", INDENT)
    logger.debug("Resolving blueprint '%s'", model.name)

    imports = ImportSet(model.imports)
    traits = _register_all(model.traits, imports)
    interfaces = _register_all(model.interfaces, imports)
    base_class = imports.register(model.base_class) if model.base_class else None
    interface = model.kind is BlueprintKind.INTERFACE
    properties = tuple(resolve_property(p, imports, indent) for p in model.properties)
    methods = tuple(resolve_method(m, imports, indent, interface) for m in model.methods)

    return ResolvedBlueprint(
        name=model.name,
        kind=model.kind,
        namespace=model.namespace,
        base_class=base_class,
        modifier=model.modifier,
        description=tuple(model.description),
        interfaces=interfaces,
        traits=traits,
        imports=imports.as_tuple(),
        methods=methods,
        properties=properties,
        indent=indent,
    )
