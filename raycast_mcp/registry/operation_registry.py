"""
Operation Registry - Typed catalog of extension operations.

Provides:
- Operation descriptors with JSON schemas (advisory metadata for callers)
- Per-operation argument guards that run before any handler
- Dispatch from an operation name and untyped arguments to one handler
- A structured error taxonomy mapped onto JSON-RPC error codes

The registry is built once at startup and is read-only afterwards.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from mcp import Tool
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from ..utils.response import OperationResult

logger = logging.getLogger(__name__)

JSONSchema = Dict[str, Any]
Validator = Callable[[Any], Optional[Any]]
Handler = Callable[[Any], OperationResult]


# ============================================================================
# Enums
# ============================================================================

class ErrorKind(Enum):
    """Failure kinds surfaced to callers, valued by JSON-RPC error code."""
    METHOD_NOT_FOUND = METHOD_NOT_FOUND   # Unknown operation name
    INVALID_PARAMS = INVALID_PARAMS       # Required argument missing or mistyped
    INTERNAL_ERROR = INTERNAL_ERROR       # Collaborator or filesystem failure


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class OperationDescriptor:
    """
    Describes an operation for the registry.

    The validator is a narrowing guard: it returns the typed arguments for
    the handler, or None when the raw input does not have the required shape.
    """
    name: str                   # Operation identifier (e.g., "create_extension")
    description: str            # Human-readable description
    input_schema: JSONSchema    # JSON Schema surfaced to callers
    validator: Validator        # Raw arguments -> typed arguments or None
    handler: Handler            # Typed arguments -> OperationResult

    def to_tool(self) -> Tool:
        """Render as an MCP tool definition."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


@dataclass(frozen=True)
class OperationRequest:
    """A single incoming call: operation name plus untrusted arguments."""
    operation_name: str
    arguments: Any = None


# ============================================================================
# Exceptions
# ============================================================================

class OperationRegistryError(Exception):
    """Base exception for registry and dispatch errors."""
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    @property
    def code(self) -> int:
        return self.kind.value


class OperationNotFound(OperationRegistryError):
    """Operation not found in registry."""
    kind = ErrorKind.METHOD_NOT_FOUND

    def __init__(self, name: str):
        self.operation_name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArguments(OperationRegistryError):
    """Arguments do not have the shape the operation requires."""
    kind = ErrorKind.INVALID_PARAMS

    def __init__(self, name: str):
        self.operation_name = name
        super().__init__(f"Invalid {name} arguments")


class OperationFailed(OperationRegistryError):
    """A handler's external collaborator failed."""
    kind = ErrorKind.INTERNAL_ERROR


class OperationAlreadyRegistered(OperationRegistryError):
    """Operation already registered."""
    pass


class InvalidOperationDescriptor(OperationRegistryError):
    """Invalid operation descriptor."""
    pass


# ============================================================================
# Operation Registry
# ============================================================================

class OperationRegistry:
    """
    Central, immutable catalog of operations.

    Lookup is by name; listing preserves registration order.
    """

    def __init__(self, operations: Iterable[OperationDescriptor]):
        """
        Build the registry.

        Args:
            operations: Descriptors in the order they should be listed

        Raises:
            OperationAlreadyRegistered: If two descriptors share a name
            InvalidOperationDescriptor: If a descriptor is incomplete
        """
        table: Dict[str, OperationDescriptor] = {}
        for operation in operations:
            self._validate_descriptor(operation)
            if operation.name in table:
                raise OperationAlreadyRegistered(
                    f"Operation '{operation.name}' already registered"
                )
            table[operation.name] = operation
            logger.debug(f"Registered operation: {operation.name}")

        self._operations: Mapping[str, OperationDescriptor] = MappingProxyType(table)
        logger.info(f"OperationRegistry initialized with {len(table)} operations")

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get(self, name: str) -> OperationDescriptor:
        """
        Retrieve an operation by name.

        Raises:
            OperationNotFound: If operation doesn't exist
        """
        if name not in self._operations:
            raise OperationNotFound(name)

        return self._operations[name]

    def list(self) -> List[OperationDescriptor]:
        """List all operations in registration order."""
        return list(self._operations.values())

    def exists(self, name: str) -> bool:
        """Check if operation exists."""
        return name in self._operations

    def get_tools(self) -> List[Tool]:
        """Return every operation as an MCP tool definition."""
        return [operation.to_tool() for operation in self.list()]

    # ========================================================================
    # Validation & Dispatch
    # ========================================================================

    def validate(self, name: str, arguments: Any) -> bool:
        """
        Check raw arguments against an operation's required shape.

        Returns False for unknown operations as well as malformed arguments.
        """
        if name not in self._operations:
            return False
        return self._operations[name].validator(arguments) is not None

    def dispatch(self, request: OperationRequest) -> OperationResult:
        """
        Validate a request and route it to its handler.

        Args:
            request: Operation name and raw arguments

        Returns:
            OperationResult from the handler

        Raises:
            OperationNotFound: If the operation doesn't exist
            InvalidArguments: If the required arguments are missing or mistyped
            OperationFailed: Propagated unchanged from the handler
        """
        operation = self.get(request.operation_name)

        typed_arguments = operation.validator(request.arguments)
        if typed_arguments is None:
            raise InvalidArguments(operation.name)

        logger.debug(f"Dispatching {operation.name}")
        return operation.handler(typed_arguments)

    def dispatch_call(self, name: str, arguments: Any = None) -> OperationResult:
        """Shortcut for dispatch(OperationRequest(name, arguments))."""
        return self.dispatch(OperationRequest(name, arguments))

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    @staticmethod
    def _validate_descriptor(operation: OperationDescriptor) -> None:
        if not operation.name:
            raise InvalidOperationDescriptor("Operation name is required")

        if not operation.description:
            raise InvalidOperationDescriptor("Operation description is required")

        if operation.validator is None or operation.handler is None:
            raise InvalidOperationDescriptor(
                f"Operation '{operation.name}' needs both a validator and a handler"
            )
