"""
Serialization helpers for blueprints.

Provides JSON/YAML round-trip via an intermediate dict representation so
scaffolding tools can describe definitions declaratively. Loading always
goes through the builder API, so uniqueness, constructor ordering and
input-kind checks are applied to loaded data exactly as to code-built
blueprints.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from codesynth.language import BlueprintKind
from codesynth.model import (
    Blueprint,
    Method,
    Parameter,
    Property,
    ReturnType,
    UnionType,
)


def return_type_to_data(rt: ReturnType) -> Any:
    if rt is None:
        return None
    if isinstance(rt, UnionType):
        return list(rt.types)
    return rt.name


def parameter_to_dict(p: Parameter) -> Dict[str, Any]:
    return {"name": p.name, "type": p.type, "default": p.default, "optional": p.optional}


def parameter_from_dict(d: Dict[str, Any]) -> Parameter:
    return Parameter(
        name=d["name"],
        type=d.get("type"),
        default=d.get("default"),
        optional=d.get("optional", False),
    )


def method_to_dict(m: Method) -> Dict[str, Any]:
    return {
        "name": m.name,
        "params": [parameter_to_dict(p) for p in m.params],
        "return_type": return_type_to_data(m.return_type),
        "modifier": m.modifier.value,
        "description": list(m.description),
        "exceptions": list(m.exceptions),
        "static": m.is_static,
        "interface": m.is_interface_method,
        "lines": list(m.lines),
    }


def method_from_dict(d: Dict[str, Any]) -> Method:
    method = Method(
        name=d["name"],
        parameters=[parameter_from_dict(p) for p in d.get("params", [])],
        return_type=d.get("return_type"),
        modifier=d.get("modifier", "public"),
        description=d.get("description", []),
        exceptions=d.get("exceptions", []),
    )
    if d.get("static"):
        method.as_static(True)
    if d.get("interface"):
        method.as_interface_method()
    for line in d.get("lines", []):
        method.add_line(line)
    return method


def property_to_dict(p: Property) -> Dict[str, Any]:
    return {
        "name": p.name,
        "type": p.type,
        "modifier": p.modifier.value,
        "default": p.default,
        "description": list(p.description),
        "constant": p.is_constant,
    }


def property_from_dict(d: Dict[str, Any]) -> Property:
    return Property(
        name=d["name"],
        type=d.get("type"),
        modifier=d.get("modifier", "public"),
        default=d.get("default"),
        description=d.get("description", []),
        is_constant=d.get("constant", False),
    )


def blueprint_to_dict(b: Blueprint) -> Dict[str, Any]:
    return {
        "name": b.name,
        "kind": b.kind.value,
        "namespace": b.namespace,
        "base_class": b.base_class,
        "modifier": b.modifier,
        "description": list(b.description),
        "interfaces": list(b.interfaces),
        "traits": list(b.traits),
        "imports": list(b.imports),
        "properties": [property_to_dict(p) for p in b.properties],
        "methods": [method_to_dict(m) for m in b.methods],
    }


def blueprint_from_dict(d: Dict[str, Any]) -> Blueprint:
    b = Blueprint(
        name=d.get("name", ""),
        kind=BlueprintKind(d.get("kind", BlueprintKind.CLASS.value)),
        namespace=d.get("namespace"),
        base_class=d.get("base_class"),
        modifier=d.get("modifier"),
        description=d.get("description", []),
        interfaces=d.get("interfaces", []),
        traits=d.get("traits", []),
    )
    for path in d.get("imports", []):
        b.add_class_path(path)
    for p in d.get("properties", []):
        b.add_property(property_from_dict(p))
    for m in d.get("methods", []):
        b.add_method(method_from_dict(m))
    return b


def blueprint_to_json(b: Blueprint) -> str:
    return json.dumps(blueprint_to_dict(b), sort_keys=True)


def blueprint_from_json(s: str) -> Blueprint:
    d = json.loads(s)
    return blueprint_from_dict(d)


def blueprint_to_yaml(b: Blueprint) -> str:
    return yaml.safe_dump(blueprint_to_dict(b), sort_keys=False)


def blueprint_from_yaml(s: str) -> Blueprint:
    d = yaml.safe_load(s)
    return blueprint_from_dict(d)
