"""
Example blueprint builders.

`build_example_greeter` is the minimal class used throughout the docs;
`build_example_repository` exercises namespaces, imports, traits,
constants, optional parameters, exceptions and control-flow bodies.
"""
from codesynth.model import Blueprint, Method, Parameter, Property, new_class, new_interface
from codesynth.language import NULL, literal


def build_example_greeter() -> Blueprint:
    greeter = new_class("Greeter")
    greeter.add_property(Property("name", "string"))
    greeter.add_method(
        Method("__construct")
        .add_param(Parameter("name", "string"))
        .add_line("this.name = name")
    )
    return greeter


def build_example_repository(namespace: str = "App\\Repositories") -> Blueprint:
    repo = Blueprint(
        name="UserRepository",
        namespace=namespace,
        base_class="App\\Support\\BaseRepository",
        description="Persists and looks up users.",
    )
    repo.add_implementation("App\\Contracts\\Repository")
    repo.add_trait("App\\Concerns\\LogsQueries")
    repo.add_constant(Property("table", default=literal("users")))
    repo.add_property(Property("connection", "Illuminate\\Database\\Connection", modifier="private"))
    repo.add_property(Property("cache", "?array", modifier="protected", default=NULL))

    repo.add_method(
        Method("find", description="Find a user by primary key.")
        .add_param(Parameter("withTrashed", "bool", default="false"))
        .add_param(Parameter("id", "int"))
        .throws("App\\Exceptions\\NotFoundException")
        .set_return_type("App\\Models\\User")
        .add_contents(
            "$user = $this->connection->table(self::TABLE)->find($id);\n"
            "if ($user === null) {\n"
            "    throw new NotFoundException($id);\n"
            "}\n"
            "return $user;"
        )
    )
    repo.add_method(
        Method(
            "__construct",
            parameters=[Parameter("connection", "Illuminate\\Database\\Connection")],
        ).add_line("$this->connection = $connection")
    )
    repo.add_method(
        Method("count", return_type="int")
        .as_static(True)
        .add_line("return 0")
    )
    return repo


def build_example_contract() -> Blueprint:
    return new_interface(
        "Repository",
        extends=["App\\Contracts\\Countable"],
        methods=[
            Method("find", return_type=["App\\Models\\User", "null"])
            .add_param(Parameter("id", "int")),
        ],
    )
