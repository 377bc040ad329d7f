import pytest

from grubdash.errors import NotFoundError, ValidationError
from grubdash.pipeline import Pipeline, RequestContext
from grubdash.services.store import InMemoryStore


def _context(**kwargs):
    return RequestContext(store=InMemoryStore("things"), **kwargs)


def test_runs_steps_in_order_and_returns_terminal_result():
    calls = []

    def first(context):
        calls.append("first")

    def second(context):
        calls.append("second")

    def terminal(context):
        calls.append("terminal")
        return "done"

    result = Pipeline("things.op", first, second, terminal).run(_context())

    assert result == "done"
    assert calls == ["first", "second", "terminal"]


def test_first_failure_stops_later_steps_and_terminal():
    calls = []

    def fails(context):
        calls.append("fails")
        raise ValidationError("first problem")

    def also_fails(context):
        calls.append("also_fails")
        raise NotFoundError("second problem")

    def terminal(context):
        calls.append("terminal")

    with pytest.raises(ValidationError) as exc_info:
        Pipeline("things.op", fails, also_fails, terminal).run(_context())

    assert exc_info.value.message == "first problem"
    assert exc_info.value.status_code == 400
    assert calls == ["fails"]


def test_steps_share_the_request_context():
    def remember(context):
        context.entity_id = context.params["thingId"]

    def terminal(context):
        return context.entity_id

    pipeline = Pipeline("things.op", remember, terminal)
    assert pipeline.run(_context(params={"thingId": "t-1"})) == "t-1"


def test_terminal_only_pipeline():
    pipeline = Pipeline("things.list", lambda context: context.store.list())
    assert pipeline.run(_context()) == []


def test_pipeline_needs_a_terminal():
    with pytest.raises(ValueError):
        Pipeline("things.empty")
