"""
Configuration for ExtropiaLingo.

Paths and environment overrides used when loading the morpheme dictionary.
"""

import os
from pathlib import Path


PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_MORPHEMES_PATH = DATA_DIR / "morphemes.yaml"

# Environment variable pointing at an alternative dictionary file
MORPHEMES_PATH_ENV = "EXTROPIA_MORPHEMES_PATH"


def get_morphemes_path() -> Path:
    """Resolve the dictionary path: env override first, packaged file otherwise."""
    override = os.environ.get(MORPHEMES_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_MORPHEMES_PATH
