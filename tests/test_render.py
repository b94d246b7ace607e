from __future__ import annotations

import pytest

from gowrap.errors import RenderError
from gowrap.render import HELPERS, capitalize, complete_template, render
from gowrap.resolver import resolve


def test_helpers_are_a_closed_set():
    assert set(HELPERS) == {"camelize", "capitalize", "lowercase", "uppercase"}


def test_capitalize_title_cases_words():
    assert capitalize("read all") == "Read All"
    assert capitalize("fooBar") == "FooBar"


def test_complete_template_adds_package_and_directive():
    out = complete_template("body", package="main", command="gowrap -t x Reader")
    assert out == "package main\n\n//go:generate gowrap -t x Reader\n\nbody"
    assert complete_template("body", package="main") == "package main\n\nbody"


def test_render_exposes_type_and_helpers(io_loaded):
    wrapped = resolve("Reader", io_loaded, "main")
    template = (
        "type {{ type.name|camelize }}Wrapper struct { base {{ type.base() }} }\n"
        "{% for m in type.methods %}"
        "func (w {{ type.name|camelize }}Wrapper) {{ m.declaration() }} {\n"
        "\t{{ uppercase(m.name) }}: return w.base.{{ m.call() }}\n"
        "}\n"
        "{% endfor %}"
    )
    out = render(wrapped, template)
    assert out.startswith("package main\n\n")
    assert "type readerWrapper struct { base io.Reader }" in out
    assert "func (w readerWrapper) Read(p []byte) (int, error) {" in out
    assert "READ: return w.base.Read(p)" in out


def test_render_does_not_escape_go_source(io_loaded):
    wrapped = resolve("Reader", io_loaded, "main")
    out = render(wrapped, '{{ type.methods[0].params_map() }}')
    assert 'map[string]interface{}{\n"p": p}' in out


def test_render_undefined_variable_raises(io_loaded):
    wrapped = resolve("Reader", io_loaded, "main")
    with pytest.raises(RenderError):
        render(wrapped, "{{ nope }}")


def test_render_syntax_error_raises(io_loaded):
    wrapped = resolve("Reader", io_loaded, "main")
    with pytest.raises(RenderError):
        render(wrapped, "{% for %}")


def test_render_wraps_python_errors_from_template(io_loaded):
    wrapped = resolve("Reader", io_loaded, "main")
    with pytest.raises(RenderError, match="TypeError"):
        render(wrapped, "{{ type.methods[0].return_struct() }}")
    with pytest.raises(RenderError, match="ZeroDivisionError"):
        render(wrapped, "{{ 1 / 0 }}")
