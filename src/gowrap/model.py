"""Wrapped-type model handed to templates.

Every helper below is a pure function of the dataclass fields so templates
can call them freely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Param:
    name: str
    type: str  # element type when variadic
    variadic: bool = False

    @property
    def passed(self) -> str:
        """Name as it appears in a call; variadic params are spread with `...`."""
        if self.variadic:
            return self.name + "..."
        return self.name

    @property
    def declared(self) -> str:
        if self.variadic:
            return f"{self.name} ...{self.type}"
        return f"{self.name} {self.type}"

    @property
    def field_type(self) -> str:
        """Type of a struct field holding this param's value."""
        if self.variadic:
            return "[]" + self.type
        return self.type


@dataclass(frozen=True)
class Method:
    name: str
    params: tuple[Param, ...] = ()
    results: tuple[Param, ...] = ()
    accepts_context: bool = False
    returns_error: bool = False

    @property
    def has_params(self) -> bool:
        return len(self.params) > 0

    @property
    def has_results(self) -> bool:
        return len(self.results) > 0

    def signature(self) -> str:
        """`(a int, b ...string) (int, error)`; results are rendered as types only."""
        params = ", ".join(p.declared for p in self.params)
        results = ", ".join(r.type for r in self.results)
        return f"({params}) ({results})"

    def declaration(self) -> str:
        return self.name + self.signature()

    def call(self) -> str:
        return self.name + "(" + ", ".join(p.passed for p in self.params) + ")"

    def params_names(self) -> str:
        return ", ".join(p.name for p in self.params)

    def results_names(self) -> str:
        return ", ".join(r.name for r in self.results)

    def params_struct(self) -> str:
        return _struct(self.params)

    def results_struct(self) -> str:
        return _struct(self.results)

    def params_map(self) -> str:
        return _map(self.params)

    def results_map(self) -> str:
        return _map(self.results)

    def return_struct(self, struct_name: str) -> str:
        """Return statement reading every result back from `struct_name`."""
        if not self.results:
            return "return"
        return "return " + ", ".join(f"{struct_name}.{r.name}" for r in self.results)


@dataclass(frozen=True)
class WrappedType:
    name: str
    source_package: str
    target_package: str
    is_interface: bool
    methods: tuple[Method, ...] = ()

    @property
    def needs_qualifier(self) -> bool:
        return self.source_package != self.target_package

    @property
    def qualified_name(self) -> str:
        if self.needs_qualifier:
            return f"{self.source_package}.{self.name}"
        return self.name

    def camelize(self) -> str:
        return camelize(self.name)

    def base(self) -> str:
        """Type the wrapper embeds: the interface itself, or a pointer to a concrete type."""
        if self.is_interface:
            return self.qualified_name
        return "*" + self.qualified_name


def camelize(s: str) -> str:
    """Lower-case the first letter: `HTTPClient` -> `hTTPClient`."""
    return s[:1].lower() + s[1:]


def _struct(params: tuple[Param, ...]) -> str:
    fields = "\n ".join(f"{p.name} {p.field_type}" for p in params)
    return "struct{\n" + fields + "}"


def _map(params: tuple[Param, ...]) -> str:
    entries = ",\n ".join(f'"{p.name}": {p.name}' for p in params)
    return "map[string]interface{}{\n" + entries + "}"
