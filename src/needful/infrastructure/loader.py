"""Resolve ``module:Class`` target strings to classes.

Used by the CLI to find the class whose contract a command operates on.
Extra search paths come from ``[loader] search_paths`` in needful.toml.
"""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class TargetLoadError(LookupError):
    """A target string could not be resolved to a class."""

    code = "TARGET_NOT_FOUND"


def _ensure_search_paths(search_paths: Sequence[Path]) -> None:
    for path in reversed(search_paths):
        entry = str(path)
        if entry not in sys.path:
            sys.path.insert(0, entry)
            logger.debug("Added %s to import path", entry)


def load_target(target: str, search_paths: Sequence[Path] = ()) -> type:
    """Import ``package.module:Qualified.Name`` and return the class.

    Raises:
        TargetLoadError: The target is malformed, the module cannot be
            imported, the attribute is missing, or it is not a class.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        msg = f"Invalid target '{target}'. Expected 'module:Class'"
        raise TargetLoadError(msg)

    _ensure_search_paths(search_paths)
    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module '{module_name}': {exc}"
        raise TargetLoadError(msg) from exc

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            msg = f"Module '{module_name}' has no attribute '{qualname}'"
            raise TargetLoadError(msg) from exc

    if not isinstance(obj, type):
        msg = f"Target '{target}' is {type(obj).__name__}, not a class"
        raise TargetLoadError(msg)
    return obj
