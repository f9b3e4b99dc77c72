"""Ready-made failure values, meant to be carried by `Failure` results.

Each category fills in a default message, code, level, hint and source.
Any of these can be overridden by keyword:

```python
Failure(ValidationFailure(message="Name is required."))
```

The failures are exceptions too, so code that prefers raising can raise
them directly and convert later with `DomainFailure.from_exception`.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field, fields
import functools
from enum import Enum
import logging
from typing import Any, Self

from .logging import logger
from .mirrorable import Mirrorable


class FailureLevel(Enum):
    INFO = "info"            # informational only
    WARNING = "warning"      # non-critical, recoverable
    ERROR = "error"
    CRITICAL = "critical"    # might need immediate attention

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]

    def __str__(self):
        return self.value


_LOGGING_LEVELS = {
    FailureLevel.INFO: logging.INFO,
    FailureLevel.WARNING: logging.WARNING,
    FailureLevel.ERROR: logging.ERROR,
    FailureLevel.CRITICAL: logging.CRITICAL,
}


@dataclass(eq=False, kw_only=True)
class DomainFailure(Mirrorable, Exception):
    """Base class for all failure categories.

    Equality covers `message`, `code`, `level`, `hint` and `source`; the
    `stack_trace` is only there for diagnostics and is not kept by `copy`
    or `pickle`, since tracebacks support neither.

    Fields cannot be reassigned once set: failures are hashable. Use
    `dataclasses.replace` to derive a changed copy.
    """
    message: str
    code: int | None = None
    level: FailureLevel = FailureLevel.ERROR
    hint: str | None = None
    source: str | None = None
    stack_trace: Any = field(default=None, repr=False)

    def __post_init__(self):
        Exception.__init__(self, self.message)

    def __setattr__(self, name: str, value: Any):
        if name in self.__dataclass_fields__ and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field `{name}`")
        super().__setattr__(name, value)

    def __reduce__(self):
        # `BaseException.__reduce__` would pass `self.args` positionally.
        kwargs = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "stack_trace"}
        return (functools.partial(type(self), **kwargs), ())

    @property
    def props(self):
        # Tagged with the field name: several fields may legitimately share a
        # value (usually `None`).
        return [
            ("message", self.message),
            ("code", self.code),
            ("level", self.level),
            ("hint", self.hint),
            ("source", self.source),
        ]

    def __str__(self):
        return (
            f"{type(self).__name__}(message: {self.message}, code: {self.code}, "
            f"level: {self.level}, hint: {self.hint}, source: {self.source})"
        )

    @classmethod
    def from_exception(cls, exc: BaseException, **overrides: Any) -> Self:
        args: dict[str, Any] = {"message": str(exc), "stack_trace": exc.__traceback__}
        args.update(overrides)
        return cls(**args)

    def report(self, log: logging.Logger | None = None):
        (log or logger()).log(self.level.logging_level, "%s", self)


@dataclass(eq=False, kw_only=True)
class ServerFailure(DomainFailure):
    """Something went wrong on the server or backend."""
    message: str = "A server error occurred."
    hint: str | None = "Try again later."
    code: int | None = 500
    level: FailureLevel = FailureLevel.ERROR
    source: str | None = "Server"


@dataclass(eq=False, kw_only=True)
class UnauthorizedFailure(DomainFailure):
    """HTTP 401."""
    message: str = "Unauthorized access."
    hint: str | None = "Please login to continue."
    code: int | None = 401
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Auth"


@dataclass(eq=False, kw_only=True)
class ForbiddenFailure(DomainFailure):
    """HTTP 403."""
    message: str = "Access is forbidden."
    hint: str | None = "You do not have permission."
    code: int | None = 403
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Auth"


@dataclass(eq=False, kw_only=True)
class NotFoundFailure(DomainFailure):
    """HTTP 404."""
    message: str = "Requested resource not found."
    hint: str | None = "Please check and try again."
    code: int | None = 404
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Server"


@dataclass(eq=False, kw_only=True)
class LocalFailure(DomainFailure):
    """Device-side errors such as file or database access."""
    message: str = "A local error occurred."
    hint: str | None = "Something went wrong on your device."
    level: FailureLevel = FailureLevel.ERROR
    source: str | None = "Local"


@dataclass(eq=False, kw_only=True)
class CacheFailure(DomainFailure):
    message: str = "Cache error."
    hint: str | None = "Please clear cache or restart the app."
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Cache"


@dataclass(eq=False, kw_only=True)
class NetworkFailure(DomainFailure):
    """No connection at all. The code is -1 since there is no HTTP status."""
    message: str = "No internet connection."
    hint: str | None = "Please check your connection."
    code: int | None = -1
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Network"


@dataclass(eq=False, kw_only=True)
class TimeoutFailure(DomainFailure):
    message: str = "The request timed out."
    hint: str | None = "Check your network and try again."
    code: int | None = 408
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Network"


@dataclass(eq=False, kw_only=True)
class FormatFailure(DomainFailure):
    """Malformed data, e.g. invalid JSON."""
    message: str = "Data format error."
    hint: str | None = "Please contact support."
    level: FailureLevel = FailureLevel.ERROR
    source: str | None = "Parsing"


@dataclass(eq=False, kw_only=True)
class ValidationFailure(DomainFailure):
    """Invalid user input."""
    message: str = "Validation failed."
    hint: str | None = "Please correct the input fields."
    level: FailureLevel = FailureLevel.INFO
    source: str | None = "Form"


@dataclass(eq=False, kw_only=True)
class UnknownFailure(DomainFailure):
    message: str = "An unknown error occurred."
    hint: str | None = "Try restarting the app or contact support."
    level: FailureLevel = FailureLevel.CRITICAL
    source: str | None = "Unknown"


@dataclass(eq=False, kw_only=True)
class ConflictFailure(DomainFailure):
    """HTTP 409."""
    message: str = "Conflict occurred."
    hint: str | None = "Please try again or contact support."
    code: int | None = 409
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Server"


@dataclass(eq=False, kw_only=True)
class BadRequestFailure(DomainFailure):
    """HTTP 400."""
    message: str = "Invalid request."
    hint: str | None = "Please check your data and try again."
    code: int | None = 400
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Client"


@dataclass(eq=False, kw_only=True)
class ExpectedFailure(DomainFailure):
    """Not really an error, e.g. an empty result set."""
    message: str = "No data available."
    hint: str | None = "Try refreshing the page."
    level: FailureLevel = FailureLevel.INFO
    source: str | None = "App"


@dataclass(eq=False, kw_only=True)
class PermissionFailure(DomainFailure):
    """Missing or denied app permissions (location, camera, storage, ...)."""
    message: str = "Permission denied."
    hint: str | None = "Please allow permissions from the app settings."
    level: FailureLevel = FailureLevel.WARNING
    source: str | None = "Permissions"


@dataclass(eq=False, kw_only=True)
class PaymentFailure(DomainFailure):
    """Declined cards, gateway errors, insufficient funds and the like."""
    message: str = "Payment could not be completed."
    hint: str | None = "Please try another payment method."
    level: FailureLevel = FailureLevel.ERROR
    source: str | None = "Payment"


@dataclass(eq=False, kw_only=True)
class DeviceFailure(DomainFailure):
    """Sensor failure, battery issue, OS-specific problems."""
    message: str = "Device error occurred."
    hint: str | None = "Restart the app or device."
    level: FailureLevel = FailureLevel.ERROR
    source: str | None = "Device"


FAILURE_TYPES: dict[str, type[DomainFailure]] = {
    cls.__name__: cls for cls in [
        ServerFailure,
        UnauthorizedFailure,
        ForbiddenFailure,
        NotFoundFailure,
        LocalFailure,
        CacheFailure,
        NetworkFailure,
        TimeoutFailure,
        FormatFailure,
        ValidationFailure,
        UnknownFailure,
        ConflictFailure,
        BadRequestFailure,
        ExpectedFailure,
        PermissionFailure,
        PaymentFailure,
        DeviceFailure,
    ]
}
