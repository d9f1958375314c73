import codecs
import logging
import os
from pathlib import Path
from typing import NamedTuple, Optional, Union

from rotcli.core.exceptions import (
    InputFileNotFound,
    InputFileUnreadable,
    MalformedEncoding,
    OutputFileUnwritable,
    UnknownEncoding,
)
from rotcli.core.rotator import rotate
from rotcli.utils.tools import display_name

log = logging.getLogger("rotcli.core.textfile")

DEFAULT_ENCODING = "utf-8"


class TextFile:
    def __init__(self, path: Union[str, os.PathLike], encoding: str = DEFAULT_ENCODING):
        self.path = Path(path)
        self.encoding = encoding

    def __str__(self):
        return str(self.path)

    def __repr__(self):
        return f"<TextFile path='{self.path}' encoding='{self.encoding}'>"

    def __eq__(self, other):
        if not isinstance(other, TextFile):
            return NotImplemented

        return self.path == other.path and self.encoding == other.encoding

    @property
    def name(self) -> str:
        return display_name(self.path)

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    def check_encoding(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise UnknownEncoding(f"Unknown encoding '{self.encoding}'")

    def read_bytes(self) -> bytes:
        log.debug(f"read_bytes: {self}")
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            raise InputFileNotFound(f"File '{self.path}' does not exist")
        except IsADirectoryError:
            raise InputFileUnreadable(f"File '{self.path}' is a directory")
        except PermissionError:
            raise InputFileUnreadable(f"Permission denied while reading '{self.path}'")
        except OSError as e:
            raise InputFileUnreadable(f"Could not read '{self.path}': {e.strerror or e}")

    def read(self) -> str:
        self.check_encoding()
        content = self.read_bytes()

        # decode manually instead of opening in text mode so that line endings are kept as-is
        try:
            return content.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise MalformedEncoding(
                f"File '{self.path}' is not valid {self.encoding}: "
                f"cannot decode byte(s) at position {e.start}-{e.end - 1}"
            )

    def write(self, content: Union[str, bytes]):
        log.debug(f"write: {self}")
        if isinstance(content, str):
            self.check_encoding()
            try:
                content = content.encode(self.encoding)
            except UnicodeEncodeError as e:
                raise OutputFileUnwritable(f"Cannot encode content for '{self.path}' as {self.encoding}: {e.reason}")

        try:
            self.path.write_bytes(content)
        except FileNotFoundError:
            raise OutputFileUnwritable(f"Directory of '{self.path}' does not exist")
        except IsADirectoryError:
            raise OutputFileUnwritable(f"File '{self.path}' is a directory")
        except PermissionError:
            raise OutputFileUnwritable(f"Permission denied while writing '{self.path}'")
        except OSError as e:
            raise OutputFileUnwritable(f"Could not write '{self.path}': {e.strerror or e}")


class RotationResult(NamedTuple):
    source: TextFile
    destination: TextFile
    original: Union[str, bytes]
    rotated: Union[str, bytes]


def rotate_file(
    source: Union[str, os.PathLike],
    destination: Optional[Union[str, os.PathLike]] = None,
    encoding: str = DEFAULT_ENCODING,
    binary: bool = False,
) -> RotationResult:
    """
    Reads the whole source file, applies ROT13 and writes the whole result to destination.
    Destination defaults to the source, overwriting it. Nothing is written if reading fails.
    """
    source_file = TextFile(source, encoding=encoding)
    destination_file = TextFile(destination, encoding=encoding) if destination is not None else source_file
    log.debug(f"rotate_file: (source={source_file}, destination={destination_file}, binary={binary})")

    original = source_file.read_bytes() if binary else source_file.read()
    rotated = rotate(original)
    destination_file.write(rotated)

    return RotationResult(source_file, destination_file, original, rotated)
