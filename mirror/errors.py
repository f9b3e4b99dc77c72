from dataclasses import dataclass
from typing import Any


class InvalidMirrorState(Exception):
    """A `Mirror` that is neither a `Success` nor a `Failure`. This is a bug
    in whoever subclassed `Mirror`, never a user error."""
    def __init__(self, obj: Any):
        super().__init__(f"Invalid Mirror state: {type(obj).__name__}")


class UserError(Exception):
    def __str__(self):
        return "Unknown user error."


@dataclass
class HelpfulUserError(UserError):
    msg: str

    def __str__(self):
        return self.msg


@dataclass
class InputError(UserError):
    expected: Any
    got: Any

    def __str__(self):
        return f"Expected {self.expected}, got: {self.got!r}"


@dataclass
class UnknownCategory(UserError):
    name: str

    def __str__(self):
        return f"No failure category named `{self.name}`."
