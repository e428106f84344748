"""File templates for generated Raycast extensions."""

from .extension_templates import (
    ENTRY_FILENAME,
    INDEX_SOURCE,
    MANIFEST_FILENAME,
    SOURCE_DIRNAME,
    TSCONFIG_FILENAME,
    package_manifest,
    render_json,
    tsconfig,
)

__all__ = [
    'ENTRY_FILENAME',
    'INDEX_SOURCE',
    'MANIFEST_FILENAME',
    'SOURCE_DIRNAME',
    'TSCONFIG_FILENAME',
    'package_manifest',
    'render_json',
    'tsconfig',
]
