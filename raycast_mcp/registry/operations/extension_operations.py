"""
Extension operation registrations.

Describes create_extension, build_extension and publish_extension and binds
each one to its argument guard and to an ExtensionTools handler.
"""

import logging
from typing import List, Optional

from ...tools.extension_tools import ExtensionTools
from ...validators.arguments import ARGUMENT_GUARDS
from ..operation_registry import OperationDescriptor, OperationRegistry

logger = logging.getLogger(__name__)


# ============================================================================
# Input Schemas
# ============================================================================

CREATE_EXTENSION_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Extension name (package name)",
        },
        "title": {
            "type": "string",
            "description": "Extension title (display name)",
        },
        "description": {
            "type": "string",
            "description": "Extension description",
        },
        "mode": {
            "type": "string",
            "enum": ["view", "no-view"],
            "description": "Extension mode",
            "default": "view",
        },
        "language": {
            "type": "string",
            "enum": ["typescript", "javascript"],
            "description": "Programming language",
            "default": "typescript",
        },
        "template": {
            "type": "string",
            "enum": ["default", "detail", "form", "grid", "list"],
            "description": "Extension template",
            "default": "default",
        },
        "path": {
            "type": "string",
            "description": "Directory to create the extension in",
        },
    },
    "required": ["name", "title"],
}

BUILD_EXTENSION_SCHEMA = {
    "type": "object",
    "properties": {
        "path": {
            "type": "string",
            "description": "Path to extension directory",
        },
        "mode": {
            "type": "string",
            "enum": ["development", "production"],
            "description": "Build mode",
            "default": "development",
        },
    },
    "required": ["path"],
}

PUBLISH_EXTENSION_SCHEMA = {
    "type": "object",
    "properties": {
        "path": {
            "type": "string",
            "description": "Path to extension directory",
        },
        "version": {
            "type": "string",
            "description": "Version to publish (e.g., 1.0.0)",
        },
    },
    "required": ["path"],
}


# ============================================================================
# Operation Descriptors
# ============================================================================

def build_operations(tools: ExtensionTools) -> List[OperationDescriptor]:
    """Create the extension operation descriptors bound to the given handlers."""
    return [
        OperationDescriptor(
            name="create_extension",
            description="Create a new Raycast extension project",
            input_schema=CREATE_EXTENSION_SCHEMA,
            validator=ARGUMENT_GUARDS["create_extension"],
            handler=tools.create_extension,
        ),
        OperationDescriptor(
            name="build_extension",
            description="Build a Raycast extension",
            input_schema=BUILD_EXTENSION_SCHEMA,
            validator=ARGUMENT_GUARDS["build_extension"],
            handler=tools.build_extension,
        ),
        OperationDescriptor(
            name="publish_extension",
            description="Publish a Raycast extension",
            input_schema=PUBLISH_EXTENSION_SCHEMA,
            validator=ARGUMENT_GUARDS["publish_extension"],
            handler=tools.publish_extension,
        ),
    ]


def create_registry(tools: Optional[ExtensionTools] = None) -> OperationRegistry:
    """Build the registry of extension operations.

    Args:
        tools: Handler instance (defaults to ExtensionTools with a real runner)
    """
    registry = OperationRegistry(build_operations(tools or ExtensionTools()))
    logger.info(
        "Registered extension operations: "
        + ", ".join(op.name for op in registry.list())
    )
    return registry
