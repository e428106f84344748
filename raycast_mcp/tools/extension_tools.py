"""Raycast extension tools: create, build and publish extension projects."""

import logging
import os
from pathlib import Path
from typing import Optional

from ..config.settings import get_setting
from ..registry.operation_registry import OperationFailed
from ..templates.extension_templates import (
    ENTRY_FILENAME,
    INDEX_SOURCE,
    MANIFEST_FILENAME,
    SOURCE_DIRNAME,
    TSCONFIG_FILENAME,
    package_manifest,
    render_json,
    tsconfig,
)
from ..utils.command_runner import CommandError, CommandRunner, SubprocessRunner
from ..utils.response import OperationResult, success_response
from ..validators.arguments import (
    BuildExtensionArgs,
    CreateExtensionArgs,
    PublishExtensionArgs,
)

logger = logging.getLogger(__name__)

RUNTIME_DEPENDENCIES = ["@raycast/api"]
DEV_DEPENDENCIES = ["@raycast/utils", "@types/node", "typescript"]

DEFAULT_BUILD_MODE = "development"
DEV_SCRIPT = "dev"
BUILD_SCRIPT = "build"


class ExtensionTools:
    """Handles extension operations by delegating to npm, ray and the filesystem.

    Every step runs sequentially. A failing step stops the operation and is
    reported as OperationFailed; files already written are left in place.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        npm_command: Optional[str] = None,
        ray_command: Optional[str] = None,
        author: Optional[str] = None,
    ):
        """Initialize with a command runner and toolchain executables.

        Args:
            runner: Command runner (defaults to SubprocessRunner)
            npm_command: Package manager executable (defaults to setting)
            ray_command: Raycast CLI executable (defaults to setting)
            author: Author written into new manifests (defaults to setting)
        """
        self.runner = runner or SubprocessRunner()
        self.npm = npm_command or get_setting('npm_command')
        self.ray = ray_command or get_setting('ray_command')
        self.author = author or get_setting('author')

    def create_extension(self, args: CreateExtensionArgs) -> OperationResult:
        """Scaffold a new extension directory under args.path (or the cwd)."""
        try:
            base = args.path or os.getcwd()
            if not isinstance(base, str):
                raise ValueError(f"path must be a string, got {type(base).__name__}")
            # name always nests under base, even when it starts with a separator
            full_path = Path(os.path.normpath(os.path.join(base, args.name.lstrip(os.sep))))

            full_path.mkdir(parents=True, exist_ok=True)

            self.runner.run([self.npm, "init", "-y"], cwd=full_path)
            self.runner.run(
                [self.npm, "install", "--save", *RUNTIME_DEPENDENCIES], cwd=full_path
            )
            self.runner.run(
                [self.npm, "install", "--save-dev", *DEV_DEPENDENCIES], cwd=full_path
            )

            manifest = package_manifest(
                args.name,
                args.title,
                description=args.description,
                mode=args.mode,
                author=self.author,
            )
            (full_path / MANIFEST_FILENAME).write_text(
                render_json(manifest), encoding="utf-8"
            )
            (full_path / TSCONFIG_FILENAME).write_text(
                render_json(tsconfig()), encoding="utf-8"
            )

            source_dir = full_path / SOURCE_DIRNAME
            source_dir.mkdir()
            (source_dir / ENTRY_FILENAME).write_text(INDEX_SOURCE, encoding="utf-8")
        except (CommandError, OSError, ValueError) as e:
            logger.error(f"create_extension failed for {args.name}: {e}")
            raise OperationFailed(f"Failed to create extension: {e}") from e

        logger.info(f"Created extension {args.name} at {full_path}")
        return success_response(
            f'Successfully created Raycast extension "{args.name}" at {full_path}'
        )

    def build_extension(self, args: BuildExtensionArgs) -> OperationResult:
        """Run the dev script in development mode, the build script otherwise."""
        build_mode = args.mode or DEFAULT_BUILD_MODE
        script = DEV_SCRIPT if build_mode == DEFAULT_BUILD_MODE else BUILD_SCRIPT

        try:
            self.runner.run([self.npm, "run", script], cwd=args.path)
        except (CommandError, OSError, ValueError) as e:
            logger.error(f"build_extension failed in {args.path}: {e}")
            raise OperationFailed(f"Failed to build extension: {e}") from e

        return success_response(f"Successfully built extension in {build_mode} mode")

    def publish_extension(self, args: PublishExtensionArgs) -> OperationResult:
        """Bump the version when one is given, then publish with ray."""
        try:
            if args.version:
                self.runner.run([self.npm, "version", str(args.version)], cwd=args.path)

            self.runner.run([self.ray, "publish"], cwd=args.path)
        except (CommandError, OSError, ValueError) as e:
            logger.error(f"publish_extension failed in {args.path}: {e}")
            raise OperationFailed(f"Failed to publish extension: {e}") from e

        suffix = f" version {args.version}" if args.version else ""
        return success_response(f"Successfully published extension{suffix}")
