from __future__ import annotations

from gowrap.model import Method, Param, WrappedType, camelize


def _fetch() -> Method:
    return Method(
        name="Fetch",
        params=(Param("ctx", "context.Context"), Param("ids", "string", variadic=True)),
        results=(Param("i", "Item"), Param("err", "error")),
        accepts_context=True,
        returns_error=True,
    )


def test_method_signature_and_call():
    m = _fetch()
    assert m.signature() == "(ctx context.Context, ids ...string) (Item, error)"
    assert m.declaration() == "Fetch(ctx context.Context, ids ...string) (Item, error)"
    assert m.call() == "Fetch(ctx, ids...)"
    assert m.params_names() == "ctx, ids"
    assert m.results_names() == "i, err"


def test_method_structs_and_maps():
    m = _fetch()
    assert m.params_struct() == "struct{\nctx context.Context\n ids []string}"
    assert m.results_struct() == "struct{\ni Item\n err error}"
    assert m.params_map() == 'map[string]interface{}{\n"ctx": ctx,\n "ids": ids}'
    assert m.results_map() == 'map[string]interface{}{\n"i": i,\n "err": err}'


def test_method_return_struct():
    assert _fetch().return_struct("out") == "return out.i, out.err"
    assert Method(name="Close").return_struct("out") == "return"


def test_method_has_params_and_results():
    assert _fetch().has_params and _fetch().has_results
    empty = Method(name="Reset")
    assert not empty.has_params and not empty.has_results
    assert empty.signature() == "() ()"


def test_wrapped_type_base_and_qualifier():
    iface = WrappedType(name="Reader", source_package="io", target_package="main", is_interface=True)
    assert iface.needs_qualifier
    assert iface.qualified_name == "io.Reader"
    assert iface.base() == "io.Reader"

    local = WrappedType(name="Store", source_package="store", target_package="store", is_interface=False)
    assert not local.needs_qualifier
    assert local.base() == "*Store"
    assert local.camelize() == "store"


def test_camelize():
    assert camelize("HTTPClient") == "hTTPClient"
    assert camelize("") == ""
