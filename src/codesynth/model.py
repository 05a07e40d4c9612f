"""
Core Synthesis Model Objects

Defines the structures a caller assembles before rendering:
    - Parameters (method arguments)
    - Methods (callable members)
    - Properties (value members, including constants)
    - Comments (rendered comment blocks)
    - Blueprints (the class / interface aggregate)

ARCHITECTURAL RULE:
    These objects:
        - Never parse existing code
        - Are mutated only through their builder methods
        - Validate every input and fail fast on the wrong kind
        - Keep type references exactly as supplied; shortening of
          fully-qualified names happens in the resolver, never here

Builder methods return the entity they were called on, so calls chain:

    method = (
        Method("send")
        .add_param(Parameter("to", "string"))
        .throws("App\\Exceptions\\MailError")
        .set_return_type("bool")
    )
"""

import warnings
from dataclasses import InitVar, dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from codesynth.errors import (
    DuplicateMemberError,
    DuplicateParameterError,
    InvalidElementKind,
)
from codesynth.imports import ImportSet
from codesynth.language import (
    CONSTRUCTOR_NAME,
    NULL,
    AccessModifier,
    BlueprintKind,
    literal,
)
from codesynth.registry import MemberRegistry


def _require_name(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidElementKind(f"{what} must be a non-empty string, got {value!r}")
    return value.strip()


def _optional_type(value: Any, what: str) -> Optional[str]:
    if value is None:
        return None
    return _require_name(value, what)


def _sequence(values: Any, what: str) -> list:
    """A list of the given values; a bare string is not a sequence of names."""
    if isinstance(values, str):
        raise InvalidElementKind(f"{what} must be a list of names, got {values!r}")
    return list(values or ())


def _text_lines(value: Union[str, Iterable[str], None]) -> List[str]:
    """Split a description given as a string or a list of strings into lines."""
    if value is None:
        return []
    if isinstance(value, str):
        return value.splitlines() if value else []
    lines: List[str] = []
    for item in value:
        if not isinstance(item, str):
            raise InvalidElementKind(f"Comment lines must be strings, got {item!r}")
        lines.extend(item.splitlines() or [""])
    return lines


def _default_text(value: Any) -> Optional[str]:
    """Strings are literal source text; any other value is converted."""
    if value is None or isinstance(value, str):
        return value
    return literal(value)


# =============================================================================
# RETURN TYPES
# =============================================================================


@dataclass(frozen=True)
class SingleType:
    """A return type naming one type."""

    name: str

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name,)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UnionType:
    """A return type naming several alternative types."""

    types: Tuple[str, ...]

    @property
    def names(self) -> Tuple[str, ...]:
        return self.types

    def __str__(self) -> str:
        return "|".join(self.types)


ReturnType = Optional[Union[SingleType, UnionType]]


def as_return_type(value: Any) -> ReturnType:
    """
    Coerce a caller-supplied return type.

    Accepts None, a type name ("string" or "int|string"), a list/tuple of
    type names, or an existing SingleType / UnionType.
    """
    if value is None or isinstance(value, (SingleType, UnionType)):
        return value
    if isinstance(value, str):
        names = [n.strip() for n in value.split("|")]
    elif isinstance(value, (list, tuple)):
        names = list(value)
    else:
        raise InvalidElementKind(f"{value!r} is not a valid return type")
    names = [_require_name(n, "Return type") for n in names]
    if not names:
        raise InvalidElementKind("Return type union must name at least one type")
    if len(names) == 1:
        return SingleType(names[0])
    return UnionType(tuple(names))


# =============================================================================
# PARAMETERS & COMMENTS
# =============================================================================


@dataclass(eq=False)
class Parameter:
    """
    A method parameter.

    Properties:
        name: Parameter identifier, rendered as $name
        type: Optional type reference (may be fully-qualified)
        default: Literal default value text; non-string values are
            converted with language.literal
        optional: Explicit optional flag; a parameter with a default is
            optional as well
    """

    name: str
    type: Optional[str] = None
    default: Optional[str] = None
    optional: bool = False

    def __post_init__(self):
        self.name = _require_name(self.name, "Parameter name")
        self.type = _optional_type(self.type, "Parameter type")
        self.default = _default_text(self.default)

    @property
    def is_optional(self) -> bool:
        return self.optional or self.default is not None

    def as_optional(self) -> "Parameter":
        """Mark the parameter optional; defaults to null when no default is set."""
        self.optional = True
        if self.default is None:
            self.default = NULL
        return self

    def equals(self, other: "Parameter") -> bool:
        return isinstance(other, Parameter) and self.name == other.name


@dataclass(frozen=True)
class Comment:
    """An ordered list of comment text lines."""

    lines: Tuple[str, ...] = ()
    multiline: bool = True
    indentation: Optional[str] = None

    def __bool__(self) -> bool:
        return bool(self.lines)


# =============================================================================
# MEMBERS
# =============================================================================


@dataclass(eq=False)
class Method:
    """
    A method member.

    Properties:
        name: Method identifier
        params: Parameters, unique by name, in insertion order
        return_type: None, SingleType or UnionType
        modifier: AccessModifier
        description: Free text comment lines
        exceptions: Declared thrown exception names (may be qualified)
        is_static: Static flag (never set on the constructor)
        is_interface_method: Render as signature only, no body
        lines: Body lines, without statement terminators
        indentation: Optional prefix applied to every rendered line
    """

    name: str
    parameters: InitVar[Sequence[Parameter]] = ()
    return_type: Any = None
    modifier: Any = AccessModifier.PUBLIC
    description: Any = None
    exceptions: List[str] = field(default_factory=list)
    is_static: bool = False
    is_interface_method: bool = False
    lines: List[str] = field(default_factory=list)
    indentation: Optional[str] = None
    params: MemberRegistry = field(init=False, repr=False)

    def __post_init__(self, parameters: Sequence[Parameter]):
        self.name = _require_name(self.name, "Method name")
        self.return_type = as_return_type(self.return_type)
        self.modifier = AccessModifier.parse(self.modifier)
        self.description = _text_lines(self.description)
        self.params = MemberRegistry(lambda n: DuplicateParameterError(n, self.name))
        for param in parameters or ():
            self.add_param(param)
        exceptions, self.exceptions = self.exceptions, []
        self.throws(exceptions)

    @property
    def is_constructor(self) -> bool:
        return self.name == CONSTRUCTOR_NAME

    def add_param(self, param: Parameter) -> "Method":
        if not isinstance(param, Parameter):
            raise InvalidElementKind(f"{param!r} is not a Parameter")
        self.params.insert(param)
        return self

    def throws(self, exceptions: Union[str, Iterable[str], None] = ()) -> "Method":
        if exceptions is None:
            return self
        values = [exceptions] if isinstance(exceptions, str) else list(exceptions)
        names = [_require_name(value, "Exception name") for value in values]
        for name in names:
            if name not in self.exceptions:
                self.exceptions.append(name)
        return self

    def set_return_type(self, value: Any) -> "Method":
        self.return_type = as_return_type(value)
        return self

    def set_modifier(self, modifier: Any) -> "Method":
        self.modifier = AccessModifier.parse(modifier)
        return self

    def as_static(self, value: bool = True) -> "Method":
        if not isinstance(value, bool):
            raise InvalidElementKind(f"Static flag must be a bool, got {value!r}")
        if value and self.is_constructor:
            warnings.warn(f"{CONSTRUCTOR_NAME} cannot be static; flag ignored", UserWarning)
            value = False
        self.is_static = value
        return self

    def as_interface_method(self) -> "Method":
        self.is_interface_method = True
        return self

    def add_line(self, line: str) -> "Method":
        """
        Append one body line.

        Lines should not carry their own terminator; one is appended at
        render time to every line that is not a block or a comment.
        """
        if not isinstance(line, str):
            raise InvalidElementKind(f"Body lines must be strings, got {line!r}")
        self.lines.append(line)
        return self

    def add_contents(self, contents: str) -> "Method":
        """Append a multi-line chunk, stripping trailing terminators."""
        if not isinstance(contents, str):
            raise InvalidElementKind(f"Contents must be a string, got {contents!r}")
        for line in contents.split("\n"):
            self.add_line(line.rstrip().rstrip(";"))
        return self

    def add_comment(self, description: Union[str, Iterable[str]]) -> "Method":
        self.description.extend(_text_lines(description))
        return self

    def set_indentation(self, indentation: Optional[str]) -> "Method":
        self.indentation = indentation
        return self

    def equals(self, other: "Method") -> bool:
        return isinstance(other, Method) and self.name == other.name


@dataclass(eq=False)
class Property:
    """
    A property member.

    Properties:
        name: Property identifier ($name, or NAME for constants)
        type: Optional type reference (may be fully-qualified)
        modifier: AccessModifier
        default: Literal default value text (NULL for an explicit null)
        description: Free text comment lines
        is_constant: Render as a class constant
        indentation: Optional prefix applied to every rendered line
    """

    name: str
    type: Optional[str] = None
    modifier: Any = AccessModifier.PUBLIC
    default: Any = None
    description: Any = None
    is_constant: bool = False
    indentation: Optional[str] = None

    def __post_init__(self):
        self.name = _require_name(self.name, "Property name")
        self.type = _optional_type(self.type, "Property type")
        self.modifier = AccessModifier.parse(self.modifier)
        self.default = _default_text(self.default)
        self.description = _text_lines(self.description)

    def as_constant(self) -> "Property":
        self.is_constant = True
        return self

    def set_default(self, value: Any) -> "Property":
        self.default = _default_text(value)
        return self

    def set_modifier(self, modifier: Any) -> "Property":
        self.modifier = AccessModifier.parse(modifier)
        return self

    def add_comment(self, description: Union[str, Iterable[str]]) -> "Property":
        self.description.extend(_text_lines(description))
        return self

    def set_indentation(self, indentation: Optional[str]) -> "Property":
        self.indentation = indentation
        return self

    def equals(self, other: "Property") -> bool:
        return isinstance(other, Property) and self.name == other.name


# =============================================================================
# BLUEPRINT
# =============================================================================


BLUEPRINT_MODIFIERS = ("abstract", "final")


@dataclass(eq=False)
class Blueprint:
    """
    Root container for one class or interface definition.

    Everything rendered for the definition is derived from this object.

    Properties:
        name: Class / interface name
        kind: BlueprintKind
        namespace: Namespace the definition belongs to (optional)
        base_class: Extended class reference (classes only)
        modifier: "abstract", "final" or None
        description: Free text comment lines for the leading comment
        interfaces: Implemented (or, for interfaces, extended) names
        traits: Used trait names
        imports: Paths registered explicitly with add_class_path
        methods: Methods, unique by name, constructor always first
        properties: Properties, unique by name

    INVARIANTS:
        - Method names are unique
        - Property names are unique
        - __construct, when present, is the first method
        - Interfaces and traits hold no repeated names
    """

    name: str
    kind: BlueprintKind = BlueprintKind.CLASS
    namespace: Optional[str] = None
    base_class: Optional[str] = None
    modifier: Optional[str] = None
    description: Any = None
    interfaces: List[str] = field(default_factory=list)
    traits: List[str] = field(default_factory=list)
    imports: ImportSet = field(default_factory=ImportSet)
    methods: MemberRegistry = field(init=False, repr=False)
    properties: MemberRegistry = field(init=False, repr=False)

    def __post_init__(self):
        self.name = _require_name(self.name, "Blueprint name")
        if not isinstance(self.kind, BlueprintKind):
            raise InvalidElementKind(f"{self.kind!r} is not a BlueprintKind")
        self.description = _text_lines(self.description)
        self.methods = MemberRegistry(
            lambda n: DuplicateMemberError(n, "method"), pinned=CONSTRUCTOR_NAME
        )
        self.properties = MemberRegistry(lambda n: DuplicateMemberError(n, "property"))
        interfaces = _sequence(self.interfaces, "Interfaces")
        traits = _sequence(self.traits, "Traits")
        self.interfaces, self.traits = [], []
        for value in interfaces:
            self.add_implementation(value)
        for value in traits:
            self.add_trait(value)
        if self.base_class is not None:
            base, self.base_class = self.base_class, None
            self.set_base_class(base)
        if self.namespace is not None:
            self.set_namespace(self.namespace)
        if self.modifier is not None:
            self._set_modifier(self.modifier)

    @property
    def is_interface(self) -> bool:
        return self.kind is BlueprintKind.INTERFACE

    def set_namespace(self, namespace: str) -> "Blueprint":
        self.namespace = _require_name(namespace, "Namespace")
        return self

    def set_base_class(self, name: str) -> "Blueprint":
        if self.is_interface:
            raise InvalidElementKind("Interfaces extend other interfaces, not a base class")
        self.base_class = _require_name(name, "Base class name")
        return self

    def add_implementation(self, name: str) -> "Blueprint":
        name = _require_name(name, "Interface name")
        if name not in self.interfaces:
            self.interfaces.append(name)
        return self

    def add_trait(self, name: str) -> "Blueprint":
        if self.is_interface:
            raise InvalidElementKind("Interfaces cannot use traits")
        name = _require_name(name, "Trait name")
        if name not in self.traits:
            self.traits.append(name)
        return self

    def add_method(self, method: Method) -> "Blueprint":
        if not isinstance(method, Method):
            raise InvalidElementKind(f"{method!r} is not a Method")
        self.methods.insert(method)
        return self

    def add_property(self, prop: Property) -> "Blueprint":
        if not isinstance(prop, Property):
            raise InvalidElementKind(f"{prop!r} is not a Property")
        if self.is_interface and not prop.is_constant:
            raise InvalidElementKind("Interfaces may only declare constants")
        self.properties.insert(prop)
        return self

    def add_constant(self, prop: Property) -> "Blueprint":
        if not isinstance(prop, Property):
            raise InvalidElementKind(f"{prop!r} is not a Property")
        if self.properties.find(prop) != -1:
            raise DuplicateMemberError(prop.name, "property")
        return self.add_property(prop.as_constant())

    def add_class_path(self, path: str) -> "Blueprint":
        """Register a path for the import section without referencing it."""
        self.imports.register(_require_name(path, "Class path"))
        return self

    def add_comment(self, description: Union[str, Iterable[str]]) -> "Blueprint":
        self.description.extend(_text_lines(description))
        return self

    def _set_modifier(self, modifier: str) -> "Blueprint":
        if modifier not in BLUEPRINT_MODIFIERS:
            raise InvalidElementKind(f"{modifier!r} is not one of {BLUEPRINT_MODIFIERS}")
        if self.is_interface:
            raise InvalidElementKind("Interfaces cannot be abstract or final")
        self.modifier = modifier
        return self

    def as_final(self) -> "Blueprint":
        return self._set_modifier("final")

    def as_abstract(self) -> "Blueprint":
        return self._set_modifier("abstract")

    def get_method(self, name: str) -> Optional[Method]:
        return self.methods.get(name)

    def get_property(self, name: str) -> Optional[Property]:
        return self.properties.get(name)

    def __str__(self) -> str:
        from codesynth.backends.php_generator import generate_class

        return generate_class(self)


def _check_all(values: Iterable[Any], kind: type, what: str) -> list:
    values = _sequence(values, what)
    for value in values:
        if not isinstance(value, kind):
            raise InvalidElementKind(f"{value!r} is not an instance of {what}")
    return values


def new_class(
    name: str,
    implementations: Iterable[str] = (),
    methods: Iterable[Method] = (),
    properties: Iterable[Property] = (),
) -> Blueprint:
    """Create a class blueprint, validating every supplied element first."""
    implementations = _check_all(implementations, str, "str")
    methods = _check_all(methods, Method, "Method")
    properties = _check_all(properties, Property, "Property")
    blueprint = Blueprint(name=name)
    for value in implementations:
        blueprint.add_implementation(value)
    for method in methods:
        blueprint.add_method(method)
    for prop in properties:
        blueprint.add_property(prop)
    return blueprint


def new_interface(
    name: str,
    extends: Iterable[str] = (),
    methods: Iterable[Method] = (),
) -> Blueprint:
    """
    Create an interface blueprint.

    Every method renders as a signature; the resolver forces this, so the
    supplied Method objects are not modified.
    """
    extends = _check_all(extends, str, "str")
    methods = _check_all(methods, Method, "Method")
    blueprint = Blueprint(name=name, kind=BlueprintKind.INTERFACE)
    for value in extends:
        blueprint.add_implementation(value)
    for method in methods:
        blueprint.add_method(method)
    return blueprint
