"""
Tests for blueprint resolution.

Resolution shortens fully-qualified names, collects imports and threads
indentation, without touching the input blueprint.
"""

import logging

from codesynth.backends.php_generator import render_class
from codesynth.examples import build_example_greeter, build_example_repository
from codesynth.language import BlueprintKind
from codesynth.model import Blueprint, Method, Parameter, SingleType, UnionType
from codesynth.resolver import ResolvedBlueprint, resolve, resolve_method


class TestResolveNames:
    """Name shortening and import collection."""

    def test_declaration_names_shortened(self):
        blueprint = Blueprint(
            "Mailer",
            base_class="App\\Support\\Service",
            interfaces=["App\\Contracts\\Sends", "Countable"],
            traits=["App\\Concerns\\Queues"],
        )
        resolved = resolve(blueprint)
        assert isinstance(resolved, ResolvedBlueprint)
        assert resolved.base_class == "Service"
        assert resolved.interfaces == ("Sends", "Countable")
        assert resolved.traits == ("Queues",)
        assert resolved.imports == (
            "App\\Concerns\\Queues",
            "App\\Contracts\\Sends",
            "App\\Support\\Service",
        )

    def test_member_types_shortened(self):
        resolved = resolve(build_example_repository())
        find = [m for m in resolved.methods if m.name == "find"][0]
        assert find.return_type == SingleType("User")
        assert find.exceptions == ("NotFoundException",)
        connection = [p for p in resolved.properties if p.name == "connection"][0]
        assert connection.type == "Connection"

    def test_import_order(self):
        resolved = resolve(build_example_repository())
        assert resolved.imports == (
            "App\\Concerns\\LogsQueries",
            "App\\Contracts\\Repository",
            "App\\Support\\BaseRepository",
            "Illuminate\\Database\\Connection",
            "App\\Models\\User",
            "App\\Exceptions\\NotFoundException",
        )

    def test_explicit_class_paths_come_first(self):
        blueprint = Blueprint("Mailer", base_class="App\\Base").add_class_path("App\\Clock")
        assert resolve(blueprint).imports == ("App\\Clock", "App\\Base")

    def test_union_return_type(self):
        method = Method("find", return_type=["App\\Models\\User", "null"])
        resolved = resolve_method(method)
        assert resolved.return_type == UnionType(("User", "null"))


class TestResolveIsPure:
    """The input blueprint is never mutated."""

    def test_blueprint_untouched(self):
        blueprint = build_example_repository()
        resolve(blueprint)
        assert blueprint.base_class == "App\\Support\\BaseRepository"
        assert blueprint.traits == ["App\\Concerns\\LogsQueries"]
        assert len(blueprint.imports) == 0
        assert blueprint.get_method("find").exceptions == ["App\\Exceptions\\NotFoundException"]

    def test_resolve_twice_equal(self):
        blueprint = build_example_repository()
        first = resolve(blueprint)
        second = resolve(blueprint)
        assert first == second
        assert render_class(first) == render_class(second)

    def test_resolving_a_snapshot_is_idempotent(self):
        once = resolve(build_example_repository())
        twice = resolve(once)
        assert twice == once
        assert twice.imports == once.imports
        assert render_class(twice) == render_class(once)

    def test_global_exception_resolves_idempotently(self):
        blueprint = Blueprint("Worker")
        blueprint.add_method(Method("run").throws("\\RuntimeException"))
        once = resolve(blueprint)
        assert once.imports == ()
        assert once.methods[0].exceptions == ("RuntimeException",)
        assert resolve(once) == once
        assert "@throws RuntimeException" in render_class(resolve(once))


class TestResolveThreading:
    """Indentation and interface flags are threaded top-down."""

    def test_members_receive_indentation(self):
        resolved = resolve(build_example_greeter())
        assert resolved.indent == "    "
        assert all(m.indentation == "    " for m in resolved.methods)
        assert all(p.indentation == "    " for p in resolved.properties)

    def test_custom_indentation(self):
        resolved = resolve(build_example_greeter(), indent="\t")
        assert resolved.methods[0].indentation == "\t"
        assert resolve(resolved).indent == "\t"

    def test_interface_methods_forced(self):
        contract = Blueprint("Sends", kind=BlueprintKind.INTERFACE)
        contract.add_method(Method("send").add_param(Parameter("to")))
        resolved = resolve(contract)
        assert resolved.methods[0].is_interface_method
        assert not contract.get_method("send").is_interface_method

    def test_constructor_first(self):
        resolved = resolve(build_example_repository())
        assert [m.name for m in resolved.methods] == ["__construct", "find", "count"]


def test_resolve_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="codesynth")
    resolve(build_example_greeter())
    assert "Resolving blueprint 'Greeter'" in caplog.text
