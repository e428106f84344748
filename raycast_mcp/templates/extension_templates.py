"""Fixed file contents written into a new Raycast extension project."""

import json
from typing import Any, Dict, Optional

MANIFEST_FILENAME = "package.json"
TSCONFIG_FILENAME = "tsconfig.json"
SOURCE_DIRNAME = "src"
ENTRY_FILENAME = "index.ts"

DEFAULT_MODE = "view"

INDEX_SOURCE = """import { List } from "@raycast/api";

export default function Command() {
  return (
    <List>
      <List.Item title="Hello World" />
    </List>
  );
}
"""


def package_manifest(
    name: str,
    title: str,
    description: Optional[Any] = None,
    mode: Optional[Any] = None,
    author: str = "raycast",
) -> Dict[str, Any]:
    """Build package.json with the Raycast metadata fields.

    Empty or missing description and mode fall back to "" and "view".
    """
    description = description or ""
    return {
        "name": name,
        "version": "1.0.0",
        "title": title,
        "description": description,
        "icon": "command-icon.png",
        "author": author,
        "license": "MIT",
        "commands": [
            {
                "name": "index",
                "title": title,
                "description": description,
                "mode": mode or DEFAULT_MODE,
            }
        ],
        "dependencies": {
            "@raycast/api": "^1.0.0",
        },
        "devDependencies": {
            "@raycast/utils": "^1.0.0",
            "@types/node": "^20.0.0",
            "typescript": "^5.0.0",
        },
        "scripts": {
            "build": f"ray build -e {SOURCE_DIRNAME}/{ENTRY_FILENAME}",
            "dev": "ray develop",
        },
    }


def tsconfig() -> Dict[str, Any]:
    """Compiler options shared by every generated extension."""
    return {
        "compilerOptions": {
            "target": "es2020",
            "lib": ["es2020"],
            "module": "commonjs",
            "moduleResolution": "node",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
        },
        "include": [f"{SOURCE_DIRNAME}/**/*"],
    }


def render_json(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2)
