"""Typed arguments for extension operations and the guards that produce them.

Validation is deliberately shallow: only the required string fields are
checked. Optional fields, including the enum-restricted ones, are passed
through untouched so that the npm and ray CLIs reject bad values themselves.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT", bound="ExtensionArgs")


class ExtensionArgs(BaseModel):
    """Base for operation arguments; unknown keys are kept, not rejected."""
    model_config = ConfigDict(extra="allow", frozen=True)


class CreateExtensionArgs(ExtensionArgs):
    """Arguments for create_extension."""
    name: StrictStr
    title: StrictStr
    description: Any = None
    mode: Any = None
    language: Any = None   # advisory only
    template: Any = None   # advisory only
    path: Any = None


class BuildExtensionArgs(ExtensionArgs):
    """Arguments for build_extension."""
    path: StrictStr
    mode: Any = None


class PublishExtensionArgs(ExtensionArgs):
    """Arguments for publish_extension."""
    path: StrictStr
    version: Any = None


def _parse(model: Type[ArgsT], raw: Any) -> Optional[ArgsT]:
    if not isinstance(raw, Mapping):
        return None
    try:
        return model.model_validate(dict(raw))
    except ValidationError as e:
        logger.debug(f"Rejected {model.__name__}: {e.error_count()} error(s)")
        return None


def parse_create_extension_args(raw: Any) -> Optional[CreateExtensionArgs]:
    """Narrow raw input to CreateExtensionArgs, or None if name/title are not strings."""
    return _parse(CreateExtensionArgs, raw)


def parse_build_extension_args(raw: Any) -> Optional[BuildExtensionArgs]:
    """Narrow raw input to BuildExtensionArgs, or None if path is not a string."""
    return _parse(BuildExtensionArgs, raw)


def parse_publish_extension_args(raw: Any) -> Optional[PublishExtensionArgs]:
    """Narrow raw input to PublishExtensionArgs, or None if path is not a string."""
    return _parse(PublishExtensionArgs, raw)


ARGUMENT_GUARDS: Dict[str, Callable[[Any], Optional[ExtensionArgs]]] = {
    "create_extension": parse_create_extension_args,
    "build_extension": parse_build_extension_args,
    "publish_extension": parse_publish_extension_args,
}


def validate(operation_name: str, raw: Any) -> bool:
    """
    Check raw arguments against the minimum shape an operation needs.

    Args:
        operation_name: One of the registered extension operations
        raw: Untrusted arguments from the caller

    Returns:
        True if the arguments can be dispatched; False otherwise (never raises)
    """
    guard = ARGUMENT_GUARDS.get(operation_name)
    if guard is None:
        return False
    return guard(raw) is not None
