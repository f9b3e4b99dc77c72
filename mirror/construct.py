from __future__ import annotations
from typing import Optional, Type, TypeGuard, TypeVar, Any, Union, cast
from enum import Enum
from pathlib import Path
import typing
import types
from dataclasses import is_dataclass
import tomllib
import json

from .errors import HelpfulUserError, InputError
from .logging import logger


T = TypeVar("T")

log = logger()


def isgeneric(annot):
    return typing.get_origin(annot) and hasattr(annot, "__args__")


def construct(annot: Any, json: Any) -> Any:
    try:
        return _construct(annot, json)
    except (AssertionError, ValueError, KeyError, TypeError) as e:
        log.debug("could not construct %s from %r", annot, json, exc_info=True)
        raise InputError(annot, json) from e


def is_object_type(dtype: Type[Any]) -> TypeGuard[Type[dict[str, Any]]]:
    return bool(
        isgeneric(dtype)
        and typing.get_origin(dtype) is dict
        and typing.get_args(dtype)[0] is str
    )


def is_optional_type(dtype: Type[Any]) -> TypeGuard[Type[Optional[Any]]]:
    return bool(
        isgeneric(dtype)
        and typing.get_origin(dtype) in (Union, types.UnionType)
        and types.NoneType in typing.get_args(dtype)
    )


def _construct(annot: Type[T], json: Any) -> T:
    """Construct an object from a given type from decoded TOML or JSON.

    The `annot` type should be one of: str, int, bool, list[T], dict[str, T],
    Optional[T], a union, an Enum or a dataclass. Enums are matched by name,
    case-insensitively. Unknown keys for a dataclass are an error.
    """
    if annot is Any:
        return cast(T, json)
    if annot is str:
        assert isinstance(json, str)
        return cast(T, json)
    if annot is bool:
        assert isinstance(json, bool)
        return cast(T, json)
    if annot is int:
        assert isinstance(json, int) and not isinstance(json, bool)
        return cast(T, json)
    if is_object_type(annot):
        assert isinstance(json, dict)
        return cast(
            T, {k: _construct(typing.get_args(annot)[1], v) for k, v in json.items()}
        )
    if isgeneric(annot) and typing.get_origin(annot) is list:
        assert isinstance(json, list)
        return cast(T, [_construct(typing.get_args(annot)[0], item) for item in json])
    if is_optional_type(annot):
        if json is None:
            return cast(T, None)
        rest = [a for a in typing.get_args(annot) if a is not types.NoneType]
        return cast(T, _construct_union(rest, json))
    if isgeneric(annot) and typing.get_origin(annot) in (Union, types.UnionType):
        return cast(T, _construct_union(list(typing.get_args(annot)), json))
    if is_dataclass(annot):
        assert isinstance(json, dict)
        arg_annot = typing.get_type_hints(annot)
        unknown = set(json) - set(arg_annot)
        assert not unknown, f"unknown fields: {unknown}"
        args = {k: _construct(arg_annot[k], json[k]) for k in json}
        return cast(T, annot(**args))
    if isinstance(json, str) and isinstance(annot, type) and issubclass(annot, Enum):
        options = {opt.name.lower(): opt for opt in annot}
        assert json.lower() in options, f"expected one of {list(options)}"
        return cast(T, options[json.lower()])
    raise ValueError(f"Couldn't construct {annot} from {repr(json)}")


def _construct_union(choices: list[Any], json: Any) -> Any:
    for dtype in choices:
        try:
            return _construct(dtype, json)
        except (AssertionError, ValueError):
            continue
    raise ValueError("None of the choices in type union match data.")


def read_data(path: Path, section: Optional[str] = None) -> Any:
    """Read decoded TOML or JSON from `path`. If `section` is given, only
    that section is returned. The `section` string may contain periods to
    indicate deeper nesting."""
    if not path.exists():
        raise HelpfulUserError(f"File not found: {path}")
    with open(path, "rb") as f:
        try:
            if path.suffix == ".toml":
                data: Any = tomllib.load(f)
            elif path.suffix == ".json":
                data = json.load(f)
            else:
                raise HelpfulUserError(f"Unrecognized file format: {path}")
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise HelpfulUserError(f"Could not parse `{path}`: {e}") from e

    try:
        if section is not None:
            for s in section.split("."):
                data = data[s]
    except KeyError as e:
        raise HelpfulUserError(
            f"Data file `{path}` should contain section `{section}`."
        ) from e

    return data


def read_from_file(data_type: Type[T], path: Path, section: Optional[str] = None) -> T:
    """Read an object of `data_type` from given `path` in given `section`.

    Example:

    ```python
    read_from_file(CatalogConfig, Path("./pyproject.toml"), "tool.mirror")
    ```
    """
    return construct(data_type, read_data(path, section))
