"""ExtropiaLingo utilities."""

from .data_loader import load_yaml, get_available_data_files

__all__ = ["load_yaml", "get_available_data_files"]
