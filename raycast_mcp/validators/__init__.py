"""Argument validation for extension operations."""

from .arguments import (
    ARGUMENT_GUARDS,
    BuildExtensionArgs,
    CreateExtensionArgs,
    ExtensionArgs,
    PublishExtensionArgs,
    parse_build_extension_args,
    parse_create_extension_args,
    parse_publish_extension_args,
    validate,
)

__all__ = [
    'ARGUMENT_GUARDS',
    'BuildExtensionArgs',
    'CreateExtensionArgs',
    'ExtensionArgs',
    'PublishExtensionArgs',
    'parse_build_extension_args',
    'parse_create_extension_args',
    'parse_publish_extension_args',
    'validate',
]
