"""Declaration models — the units a parameter contract is made of.

A declaration is one of:

- :class:`RequiredParameter`: a bare name that must be supplied;
- :class:`ParameterDefaults`: names with default values;
- :class:`NoParameters`: the type accepts no parameters at all.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class RequiredParameter(BaseModel):
    """A bare parameter name with no default."""

    model_config = {"frozen": True}

    kind: Literal["required"] = "required"
    name: str = Field(min_length=1)

    def names(self) -> tuple[str, ...]:
        return (self.name,)


class ParameterDefaults(BaseModel):
    """Parameter names mapped to their default values."""

    model_config = {"frozen": True}

    kind: Literal["defaults"] = "defaults"
    values: dict[str, Any]

    def names(self) -> tuple[str, ...]:
        return tuple(self.values)


class NoParameters(BaseModel):
    """Marker declaring that a type takes zero parameters."""

    model_config = {"frozen": True}

    kind: Literal["none"] = "none"

    def names(self) -> tuple[str, ...]:
        return ()


NO_PARAMETERS = NoParameters()

Declaration = Annotated[
    RequiredParameter | ParameterDefaults | NoParameters,
    Field(discriminator="kind"),
]


def to_declaration(arg: object) -> Declaration:
    """Normalize one argument of a declaration call.

    ``None`` means :data:`NO_PARAMETERS`, a string is a required name and a
    mapping holds defaults. Declaration models pass through unchanged.
    """
    if arg is None:
        return NO_PARAMETERS
    if isinstance(arg, RequiredParameter | ParameterDefaults | NoParameters):
        return arg
    if isinstance(arg, str):
        return RequiredParameter(name=arg)
    if isinstance(arg, Mapping):
        for key in arg:
            if not isinstance(key, str):
                msg = f"Parameter names must be strings, got {type(key).__name__}"
                raise TypeError(msg)
        return ParameterDefaults(values=dict(arg))
    msg = f"Cannot declare parameter from {type(arg).__name__}: {arg!r}"
    raise TypeError(msg)
