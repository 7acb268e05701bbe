"""OS version detection from os-release metadata.

The file format is a list of shell-style ``KEY=VALUE`` assignments, see
os-release(5). Parsing and field selection are kept apart: the scanner
only produces a ReleaseRecord, and distro-specific formatting lives in
the ``_FORMATTERS`` registry.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from . import config
from .errors import FileAccessError, UnrecognizedFormat
from .models.release import ReleaseRecord

logger = logging.getLogger(__name__)

_ESCAPE_RE = re.compile(r'\\([\\"$`])')


def _unquote(value: str) -> str:
    """Strip one pair of matching surrounding quotes.

    Double-quoted values also get their shell escapes resolved.
    """
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        inner = value[1:-1]
        if value[0] == '"':
            inner = _ESCAPE_RE.sub(r"\1", inner)
        return inner
    return value


def parse_os_release(lines: Iterable[str], path: str | None = None) -> ReleaseRecord:
    """Scan ``KEY=VALUE`` lines into a ReleaseRecord.

    Blank lines, comments and lines without '=' are skipped. A key seen
    twice keeps its last value.

    Args:
        lines: Text lines, with or without trailing newlines
        path: Source file, recorded on the result for error messages

    Returns:
        ReleaseRecord with keys in file order.
    """
    fields: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        fields[key] = _unquote(value.strip())
    return ReleaseRecord(fields=fields, path=path)


def read_os_release(path: str) -> ReleaseRecord:
    """Read and parse an os-release file.

    Raises:
        FileAccessError: If the file cannot be opened or read.
        UnrecognizedFormat: If the contents are not valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return parse_os_release(f, path=path)
    except UnicodeDecodeError as e:
        raise UnrecognizedFormat(f"not UTF-8 text ({e.reason})", path) from e
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e


def _cos_version(record: ReleaseRecord) -> str:
    # Container-Optimized OS: milestone plus build, e.g. "cos 77-12293.0.0"
    if not record.version or not record.build_id:
        raise UnrecognizedFormat("COS release without VERSION/BUILD_ID", record.path)
    return f"{record.id} {record.version}-{record.build_id}"


def _generic_version(record: ReleaseRecord) -> str:
    version = record.version or record.version_id
    if not version:
        raise UnrecognizedFormat(
            f"no VERSION or VERSION_ID for ID {record.id!r}", record.path
        )
    return f"{record.id} {version}"


_FORMATTERS: dict[str, Callable[[ReleaseRecord], str]] = {
    "cos": _cos_version,
}


def format_os_version(record: ReleaseRecord) -> str:
    """Compose a human-readable version string from a ReleaseRecord.

    The result is "<ID> <VERSION>", falling back to VERSION_ID when the
    full VERSION field is absent. Some distros have their own layout
    (see ``_FORMATTERS``).

    Raises:
        UnrecognizedFormat: If ID or every usable version field is missing.
    """
    if not record.id:
        raise UnrecognizedFormat("no ID field", record.path)
    formatter = _FORMATTERS.get(record.id, _generic_version)
    return formatter(record)


def get_os_version(path: str | None = None) -> str:
    """Return the OS version string, e.g. "ubuntu 16.04.6 LTS (Xenial Xerus)".

    Args:
        path: Release file to read. Defaults to the configured
              OS_RELEASE_PATH (normally /etc/os-release).

    Raises:
        FileAccessError: If the release file cannot be read.
        UnrecognizedFormat: If it holds no usable ID/version fields.
    """
    if path is None:
        path = config.settings.OS_RELEASE_PATH
    version = format_os_version(read_os_release(path))
    logger.debug("os version from %s: %s", path, version)
    return version


__all__ = [
    "parse_os_release",
    "read_os_release",
    "format_os_version",
    "get_os_version",
]
