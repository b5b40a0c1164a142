import os
from typing import IO

from ..core.data_models import FileRange


def whole_file(file: IO) -> FileRange:
    """
    A file range that covers a whole, already opened, file.

    The current position of the file is left unchanged.
    """
    position = file.tell()
    try:
        file.seek(0, os.SEEK_END)
        end = file.tell()
    finally:
        file.seek(position)
    return FileRange(begin=0, end=end)


def read_range(file: IO, file_range: FileRange):
    """Contents of a file range"""
    file.seek(file_range.begin)
    return file.read(file_range.length)
