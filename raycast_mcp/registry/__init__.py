"""
Operation Registry for raycast-mcp.

Provides typed, discoverable catalog of extension operations.
"""

from .operation_registry import (
    OperationRegistry,
    OperationDescriptor,
    OperationRequest,
    ErrorKind,
    # Exceptions
    OperationRegistryError,
    OperationNotFound,
    InvalidArguments,
    OperationFailed,
    OperationAlreadyRegistered,
    InvalidOperationDescriptor,
)

__all__ = [
    'OperationRegistry',
    'OperationDescriptor',
    'OperationRequest',
    'ErrorKind',
    # Exceptions
    'OperationRegistryError',
    'OperationNotFound',
    'InvalidArguments',
    'OperationFailed',
    'OperationAlreadyRegistered',
    'InvalidOperationDescriptor',
]
