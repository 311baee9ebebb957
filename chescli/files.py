"""
Filesystem collaborator.

Only what the language pack needs: reading the lines of a text file, and locating
resource files under the installation root named by the CHES_HOME environment
variable. Every failure is raised as a FileError subclass so the caller can report
it as one diagnostic.
"""
import logging
import os
import os.path

from .faults import (
    EnvironmentVariableError,
    FileOpenError,
    FileReadError,
    InvalidPathError,
    PathNotDirectoryError,
    PathNotExistsError,
    PathNotFileError,
)

logger = logging.getLogger(__name__)

ROOT_VARIABLE = "CHES_HOME"
LANGPACK_DIRECTORY = os.path.join("lib", "lang")
LANGPACK_SUFFIX = ".lang"


def read_lines(path, /, encoding="utf-8-sig"):
    """
    read a text file and return its lines without line terminators.

    a leading UTF-8 byte order mark is dropped.

    errors
    - PathNotExistsError: nothing exists at `path`.
    - PathNotFileError: `path` is a directory.
    - FileOpenError: the file exists but cannot be opened (permissions, ...).
    - FileReadError: the content cannot be read or decoded.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        raise PathNotExistsError(path)
    if os.path.isdir(path):
        raise PathNotFileError(path)

    try:
        file = open(path, encoding=encoding, newline="")
    except OSError as exception:
        raise FileOpenError(path) from exception

    with file:
        try:
            content = file.read()
        except (OSError, UnicodeDecodeError) as exception:
            raise FileReadError(path) from exception

    # only '\n' and '\r\n' end a line; other unicode separators stay in the value
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    if lines[-1] == "":
        lines.pop()
    logger.debug("read %d lines from %s", len(lines), path)
    return lines


def get_root_path(environ=None, /):
    """
    installation root taken from the CHES_HOME environment variable.

    errors
    - EnvironmentVariableError: the variable is not set.
    - InvalidPathError: the variable is set but empty.
    - PathNotExistsError / PathNotDirectoryError: it does not name a directory.
    """
    environ = os.environ if environ is None else environ
    try:
        root = environ[ROOT_VARIABLE]
    except KeyError:
        raise EnvironmentVariableError(ROOT_VARIABLE) from None
    if not root.strip():
        raise InvalidPathError(root)
    if not os.path.exists(root):
        raise PathNotExistsError(root)
    if not os.path.isdir(root):
        raise PathNotDirectoryError(root)
    return root


def get_langpack_path(language, /, environ=None):
    """
    path of the language pack file for `language` ($CHES_HOME/lib/lang/<language>.lang).
    """
    if not isinstance(language, str) or not language:
        raise ValueError("language must be a non-empty string")
    return os.path.join(get_root_path(environ), LANGPACK_DIRECTORY, language + LANGPACK_SUFFIX)


__all__ = (
    "ROOT_VARIABLE",
    "read_lines",
    "get_root_path",
    "get_langpack_path",
)
