"""
Core Utilities Module.

File helpers for the bundled lexicon, user lexicon files and CLI batch I/O.
"""

import json
from pathlib import Path
from typing import Any, Union

DATA_DIR = Path(__file__).parent.parent / "data"


def read_data_file(filename: str) -> Any:
    """
    Load a JSON data file bundled in ``banghay/data``.

    Args:
        filename: Data file name; ".json" is appended when missing

    Returns:
        The decoded JSON document (the lexicon ships as root -> {"focus:aspect": form})
    """
    if not filename.endswith(".json"):
        filename += ".json"

    with open(DATA_DIR / filename, "r", encoding="utf-8") as f:
        return json.load(f)


def get_file_contents(file_path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a text file such as a roots list or a user lexicon.

    Raises:
        UnicodeDecodeError: If the file does not decode with ``encoding``
    """
    with open(file_path, "r", encoding=encoding) as f:
        return f.read()


def write_file_contents(file_path: Union[str, Path], contents: str, encoding: str = "utf-8") -> None:
    """Write a text file, creating missing parent directories (used for batch TSV output)."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding) as f:
        f.write(contents)
