"""
I/O Utilities

File input/output operations.
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional


def load_json(file_path: Path) -> Any:
    """Load JSON file."""
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_json(data: Any, file_path: Path, indent: int = 2):
    """Save data to JSON file, keeping non-ASCII text readable."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def load_yaml(file_path: Path) -> Optional[Dict[str, Any]]:
    """Load a YAML file; an empty document loads as None."""
    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)

