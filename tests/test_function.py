import pytest

from fncoerce.errors import CoercionError
from fncoerce.errors import FunctionError
from fncoerce.errors import UnsupportedContentTypeError
from fncoerce.interfaces import InvocationResult
from fncoerce.interfaces import RuntimeContext


def greet(ctx: RuntimeContext, name: str) -> str:
    return f"Hello {name or 'world'}!"


@pytest.mark.asyncio
async def test_plain_invocation(make_function):
    res = await make_function(greet).invoke("text/plain", b"")
    assert res.body == b"Hello world!"
    assert res.content_type == "text/plain"


@pytest.mark.asyncio
async def test_json_record_invocation(make_function, person_model):
    seen = []

    def handler(ctx, person):
        seen.append(person)
        return person

    fn = make_function(handler, input_type=person_model)
    res = await fn.invoke("application/json", b'{"name":"Ann"}')
    assert seen[0].name == "Ann"
    assert res.body == b'{"name":"Ann","age":0,"nickname":null}'
    assert res.content_type == "application/json"


@pytest.mark.asyncio
async def test_response_uses_canonical_mime(make_function):
    fn = make_function(lambda ctx, v: v, input_type=dict)
    res = await fn.invoke("application/yaml", b"a: 1\n")
    assert res.content_type == "text/yaml"
    res = await fn.invoke("text/xml", b"<root><a>1</a></root>")
    assert res.content_type == "application/xml"


@pytest.mark.asyncio
async def test_unknown_mime_is_json(make_function):
    contexts = []

    def handler(ctx, v):
        contexts.append(ctx)
        return v

    res = await make_function(handler).invoke("text/html", b'"Ann"')
    assert res.body == b'"Ann"'
    assert res.content_type == "application/json"
    assert contexts[0].content_type == "text/html"
    assert contexts[0].logical_type.name == "JSON"


@pytest.mark.asyncio
async def test_strict_mode_rejects_unknown_mime(make_function):
    fn = make_function(greet, strict=True)
    with pytest.raises(UnsupportedContentTypeError) as exc:
        await fn.invoke("text/html", b"")
    assert isinstance(exc.value, CoercionError)
    assert "text/html" in exc.value.message

    res = await fn.invoke("text/plain", b"Ann")
    assert res.body == b"Hello Ann!"


@pytest.mark.asyncio
async def test_decode_failure_skips_handler(make_function):
    calls = []

    def handler(ctx, v):
        calls.append(v)
        return v

    with pytest.raises(CoercionError):
        await make_function(handler).invoke("application/json", b"{")
    assert calls == []


@pytest.mark.asyncio
async def test_encode_failure(make_function):
    fn = make_function(lambda ctx, v: {"nested": {"a": 1}}, input_type=dict)
    with pytest.raises(CoercionError):
        await fn.invoke("application/x-www-form-urlencoded", b"")


@pytest.mark.asyncio
async def test_async_handler(make_function):
    async def handler(ctx, v):
        return v.upper()

    res = await make_function(handler).invoke("text/plain", b"abc")
    assert res.body == b"ABC"


@pytest.mark.asyncio
async def test_handler_failure_is_wrapped(make_function):
    def handler(ctx, v):
        raise RuntimeError("boom")

    with pytest.raises(FunctionError) as exc:
        await make_function(handler).invoke("text/plain", b"")
    assert isinstance(exc.value.cause, RuntimeError)
    assert "boom" in str(exc.value)


@pytest.mark.asyncio
async def test_call_id_and_response_headers(make_function):
    def handler(ctx, v):
        ctx.set_response_header("X-Call", ctx.call_id)
        return v

    res = await make_function(handler).invoke(
        "text/plain", b"x", {"Fn-Call-Id": "call-1"}
    )
    assert res.headers == {"X-Call": "call-1"}


@pytest.mark.asyncio
async def test_handler_can_return_raw_result(make_function):
    raw = InvocationResult(
        body=b"\x00\x01", content_type="application/octet-stream"
    )
    res = await make_function(lambda ctx, v: raw).invoke("text/plain", b"")
    assert res is raw


@pytest.mark.asyncio
async def test_middleware_order(make_function):
    order = []

    def make_mw(tag):
        async def mw(ctx, value, nxt):
            order.append(f"{tag}>")
            out = await nxt(ctx, value)
            order.append(f"<{tag}")
            return out

        return mw

    def handler(ctx, v):
        order.append("handler")
        return v

    fn = make_function(handler, middleware=[make_mw("a")])
    fn.add_middleware(make_mw("b"))
    await fn.invoke("text/plain", b"x")
    assert order == ["a>", "b>", "handler", "<b", "<a"]


@pytest.mark.asyncio
async def test_middleware_can_rewrite_input(make_function):
    async def shout(ctx, value, nxt):
        return await nxt(ctx, value.upper())

    res = await make_function(greet, middleware=[shout]).invoke(
        "text/plain", b"ann"
    )
    assert res.body == b"Hello ANN!"
