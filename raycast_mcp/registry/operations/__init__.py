"""
Operation registrations for raycast-mcp.
"""

from .extension_operations import (
    BUILD_EXTENSION_SCHEMA,
    CREATE_EXTENSION_SCHEMA,
    PUBLISH_EXTENSION_SCHEMA,
    build_operations,
    create_registry,
)

__all__ = [
    'BUILD_EXTENSION_SCHEMA',
    'CREATE_EXTENSION_SCHEMA',
    'PUBLISH_EXTENSION_SCHEMA',
    'build_operations',
    'create_registry',
]
