from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .errors import InvalidMirrorState
from .logging import logger


log = logger()


class Mirror[T]:
    """Outcome of an operation that can fail: either a `Success` holding a
    value or a `Failure` holding an error. The error can be any object,
    usually a `DomainFailure`.

    ```python
    def parse(s: str) -> Outcome[int]:
        return Mirror.attempt(int, s, catch=ValueError)

    parse("42").map(lambda x: x * 2)     # Success(84)
    parse("x").recover(lambda _: 0)      # Success(0)
    ```

    Instances are immutable. `map`, `and_then` and `recover` return new
    instances; nothing is ever changed in place.
    """
    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def fold[R](
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[Any], R],
    ) -> R:
        match self:
            case Success(value):
                return on_success(value)
            case Failure(error):
                return on_failure(error)
            case _:
                raise InvalidMirrorState(self)

    def on_success_do(self, fn: Callable[[T], Any]) -> None:
        match self:
            case Success(value):
                fn(value)

    def on_failure_do(self, fn: Callable[[Any], Any]) -> None:
        match self:
            case Failure(error):
                fn(error)

    @property
    def value_or_none(self) -> T | None:
        return self.fold(lambda v: v, lambda _: None)

    @property
    def error_or_none(self) -> Any:
        return self.fold(lambda _: None, lambda e: e)

    def map[R](self, transform: Callable[[T], R]) -> Mirror[R]:
        """Apply `transform` to a success value. A failure is passed on with
        the same error. Exceptions raised by `transform` are not caught; use
        `and_then` with `Mirror.attempt` when the transform can fail."""
        return self.fold(
            lambda v: Success(transform(v)),
            lambda e: Failure(e),
        )

    def and_then[R](self, fn: Callable[[T], Mirror[R]]) -> Mirror[R]:
        return self.fold(fn, lambda e: Failure(e))

    def recover(self, recover_fn: Callable[[Any], T]) -> Mirror[T]:
        """Turn a failure into a success by computing a replacement value from
        the error. A success is returned as is."""
        return self.fold(
            lambda _: self,
            lambda e: Success(recover_fn(e)),
        )

    async def delay(self, duration: float | timedelta) -> Mirror[T]:
        """Wait for `duration` (seconds or a `timedelta`), then return `self`.
        This never fails, so it is no substitute for a timeout."""
        seconds = duration.total_seconds() if isinstance(duration, timedelta) else duration
        if seconds < 0:
            raise ValueError(f"delay needs a non-negative duration, got {duration}")
        await asyncio.sleep(seconds)
        log.debug("delayed `%s` for %s s", self, seconds)
        return self

    @staticmethod
    def attempt[R](
        fn: Callable[..., R],
        *args: Any,
        catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
        **kwargs: Any,
    ) -> Mirror[R]:
        try:
            return Success(fn(*args, **kwargs))
        except catch as e:
            return Failure(e)


@dataclass(frozen=True)
class Success[T](Mirror[T]):
    value: T

    def __bool__(self):
        return True

    def __str__(self):
        return f"Success({self.value})"


@dataclass(frozen=True)
class Failure[T](Mirror[T]):
    error: Any

    def __bool__(self):
        return False

    def __str__(self):
        return f"Failure({self.error})"


type Outcome[T] = Success[T] | Failure[T]
