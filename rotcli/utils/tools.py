import os
from pathlib import Path
from typing import Union


def display_name(path: Union[str, os.PathLike]) -> str:
    """
    Returns the stem of a path (file name minus the last extension),
    falling back to the path itself when there is no usable stem
    """
    stem = Path(path).stem
    return stem if stem else str(path)


def format_size(size: int) -> str:
    return f"{size} byte" if size == 1 else f"{size} bytes"
