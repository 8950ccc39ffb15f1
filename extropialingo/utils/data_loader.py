"""
Data file loader for ExtropiaLingo.

Loads YAML data files (morpheme dictionaries) from disk.
"""

from pathlib import Path
from typing import Any
import yaml

from extropialingo.config import DATA_DIR


def load_yaml(file_path: str | Path) -> dict[str, Any]:
    """
    Load a YAML mapping from a file.

    Args:
        file_path: Path to the .yaml file

    Returns:
        Parsed mapping (empty dict for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the top level of the document is not a mapping
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Data file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {file_path}, got {type(data).__name__}")
    return data


def get_available_data_files(data_dir: Path | None = None) -> list[str]:
    """
    List the YAML data files shipped with the package.

    Args:
        data_dir: Optional custom data directory

    Returns:
        List of file names (without .yaml extension)
    """
    dir_path = data_dir or DATA_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
