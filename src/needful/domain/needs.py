"""Declaration surface for host classes.

Two equivalent ways to declare a contract::

    @needs("title", show_okay=True, show_cancel=False)
    class FancyForm(Needful):
        ...

    class FancyForm(Needful, needs=("title", {"show_okay": True, "show_cancel": False})):
        ...

Then ``FancyForm(title="Login")`` succeeds, ``FancyForm(name="Login")``
raises :class:`~needful.domain.errors.UnknownParameterError` and
``FancyForm()`` raises :class:`~needful.domain.errors.MissingParametersError`.

A class with no declarations anywhere in its chain accepts any parameters.
``needs(None)`` declares that a class takes none at all.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from needful.domain.registry import declare
from needful.domain.validator import InstanceValidator

T = TypeVar("T", bound=type)


def needs(*parameters: object, **defaults: Any) -> Callable[[T], T]:
    """Class decorator declaring the parameters a class accepts.

    Decorators can be stacked; declarations keep their source order.
    """

    def decorate(cls: T) -> T:
        declare(cls, *parameters, prepend=True, **defaults)
        return cls

    return decorate


def _as_parameters(spec: object) -> tuple[object, ...]:
    if isinstance(spec, tuple | list):
        return tuple(spec)
    return (spec,)


class Needful:
    """Base class whose constructor enforces the declared contract.

    Every accepted parameter becomes an instance attribute.
    """

    def __init_subclass__(cls, needs: object = (), **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if needs is None:
            declare(cls, None)
        elif needs:
            declare(cls, *_as_parameters(needs))

    def __init__(self, **parameters: Any) -> None:
        InstanceValidator(type(self)).apply(self, parameters)
