import time

from gci.utils.context import RequestContext


def test_create_sets_deadline():
    ctx = RequestContext.create(10, request_id="abc")

    assert ctx.request_id == "abc"
    assert 9 < ctx.remaining() <= 10
    assert not ctx.expired


def test_create_generates_request_id():
    assert RequestContext.create(1).request_id != RequestContext.create(1).request_id


def test_remaining_never_negative():
    ctx = RequestContext(request_id="viejo", deadline=time.monotonic() - 5)

    assert ctx.remaining() == 0.0
    assert ctx.expired


def test_from_request_uses_trace_header(app):
    headers = {"X-Cloud-Trace-Context": "105445aa7843bc8bf206b12000100000/1;o=1"}
    with app.test_request_context("/_/service_account", headers=headers):
        from flask import request

        ctx = RequestContext.from_request(request, 3)

    assert ctx.request_id == "105445aa7843bc8bf206b12000100000"
    assert 0 < ctx.remaining() <= 3


def test_from_request_without_trace_header(app):
    with app.test_request_context("/_/service_account"):
        from flask import request

        ctx = RequestContext.from_request(request, 3)

    assert ctx.request_id
