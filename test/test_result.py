import asyncio
import logging
from datetime import timedelta

import pytest
from hypothesis import given
from hypothesis.strategies import builds, booleans, text, integers

from mirror.errors import InvalidMirrorState
from mirror.failure import NetworkFailure
from mirror.result import Mirror, Success, Failure


results = builds(lambda b, t, i: Success(i) if b else Failure(t),
                 booleans(), text(min_size=1), integers())


@given(results)
def test_result(r):
    assert r.is_success != r.is_failure
    assert (r and r.is_success and hasattr(r, "value")) \
        or (not r and r.is_failure and hasattr(r, "error"))


@given(results)
def test_fold_picks_one_branch(r):
    tag = r.fold(lambda v: ("ok", v), lambda e: ("fail", e))
    if r.is_success:
        assert tag == ("ok", r.value)
    else:
        assert tag == ("fail", r.error)


@given(integers())
def test_map_success(v):
    assert Success(v).map(lambda x: x * 2) == Success(v * 2)


@given(text())
def test_map_failure(e):
    f = Failure(e)
    g = f.map(lambda x: x + 1)
    assert g == f
    assert g is not f
    assert g.error is f.error


@given(results)
def test_recover(r):
    healed = r.recover(lambda e: len(e))
    assert healed.is_success
    if r.is_success:
        assert healed is r
    else:
        assert healed == Success(len(r.error))


def test_success():
    a = Success(42)
    assert a == Success(42)
    assert hash(a) == hash(Success(42))
    assert a != Success(100)
    assert a != Failure(42)
    assert a.is_success and not a.is_failure
    assert a.value_or_none == 42
    assert a.error_or_none is None
    assert str(a) == "Success(42)"


def test_failure():
    a = Failure("error")
    assert a == Failure("error")
    assert hash(a) == hash(Failure("error"))
    assert a != Failure("other error")
    assert not a.is_success and a.is_failure
    assert a.value_or_none is None
    assert a.error_or_none == "error"
    assert str(a) == "Failure(error)"


def test_fold_keywords():
    assert Success(42).fold(on_failure=lambda _: 0, on_success=lambda v: v) == 42
    assert Failure("fail").fold(on_failure=lambda _: "fail", on_success=lambda _: "ok") == "fail"


def test_side_effects():
    calls = []
    Success(42).on_success_do(lambda v: calls.append(("success", v)))
    Success(42).on_failure_do(lambda e: calls.append(("failure", e)))
    Failure("x").on_success_do(lambda v: calls.append(("success", v)))
    Failure("x").on_failure_do(lambda e: calls.append(("failure", e)))
    assert calls == [("success", 42), ("failure", "x")]


def test_map_does_not_catch():
    with pytest.raises(ZeroDivisionError):
        Success(0).map(lambda x: 1 / x)


def test_net_down():
    assert Failure("net-down").map(lambda x: x + 1) == Failure("net-down")


def test_and_then():
    def half(x: int) -> Mirror[int]:
        return Success(x // 2) if x % 2 == 0 else Failure(f"{x} is odd")

    assert Success(8).and_then(half).and_then(half) == Success(2)
    assert Success(6).and_then(half).and_then(half) == Failure("3 is odd")
    assert Failure("nope").and_then(half) == Failure("nope")


def test_attempt():
    assert Mirror.attempt(int, "42") == Success(42)
    r = Mirror.attempt(int, "x", catch=ValueError)
    assert r.is_failure and isinstance(r.error, ValueError)
    with pytest.raises(ValueError):
        Mirror.attempt(int, "x", catch=KeyError)


def test_domain_failure_payload():
    r = Failure(NetworkFailure())
    assert r.map(str) == Failure(NetworkFailure())
    assert r.recover(lambda e: e.code).value_or_none == -1


def test_match():
    match Success(3):
        case Success(v):
            assert v == 3
        case Failure(_):
            assert False


def test_invalid_state():
    class Neither(Mirror[int]):
        pass

    with pytest.raises(InvalidMirrorState):
        Neither().fold(lambda v: v, lambda e: e)


@pytest.mark.asyncio
@pytest.mark.timeout(1)
async def test_delay(caplog):
    loop = asyncio.get_running_loop()
    success = Success(5)
    start = loop.time()
    with caplog.at_level(logging.DEBUG, logger="mirror"):
        delayed = await success.delay(0.01)
    assert loop.time() - start >= 0.0099
    assert delayed is success
    assert delayed == Success(5)
    assert "delayed `Success(5)` for 0.01 s" in caplog.text

    failure = Failure("late")
    assert await failure.delay(timedelta(milliseconds=10)) is failure


@pytest.mark.asyncio
async def test_delay_negative():
    with pytest.raises(ValueError):
        await Success(1).delay(-1)


@pytest.mark.asyncio
@pytest.mark.timeout(1)
async def test_delay_cancel():
    task = asyncio.create_task(Success(1).delay(10))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
