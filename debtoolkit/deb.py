"""Reading and unpacking Debian binary package archives."""

from __future__ import annotations

import bz2
import gzip
import io
import logging
import lzma
import os
import re
import sys
import tarfile
import zlib
from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Sequence, Union

AR_MAGIC = b"!<arch>\n"
DEB_MAGIC = "debian-binary"
ADMIN_MEMBER = "control.tar"
DATA_MEMBER = "data.tar"
OLD_OLD_DEB_DIR = ".DEBIAN"
OLD_DEB_DIR = "DEBIAN"

_AR_HEADER_SIZE = 60
_AR_FMAG = b"`\n"
_VERSION_BUF_MAX = 39
_CTRLLEN_BUF_MAX = 40

_INT = re.compile(r"[ \t\n\v\f\r]*[+-]?\d+")
_CTRLLEN = re.compile(r"[ \t\v\f\r]*([+-]?\d+)\n")

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class DebError(Exception):
    """Raised when an archive cannot be read or unpacked."""


class Compressor(Enum):
    """Compression schemes a package member may use, keyed by file extension."""

    NONE = ""
    GZIP = ".gz"
    XZ = ".xz"
    BZIP2 = ".bz2"
    LZMA = ".lzma"

    @property
    def extension(self) -> str:
        return self.value


@dataclass(frozen=True)
class DebVersion:
    """The archive format version, as in ``2.0``."""

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class DebMember:
    """The location of a member's bytes inside the package file."""

    name: str
    compressor: Compressor
    offset: int
    size: int


@dataclass(frozen=True)
class DebPackage:
    """What was learnt from a package's headers."""

    path: str
    version: DebVersion
    size: int
    control_length: int
    member: DebMember
    legacy: bool = False
    main_length: Optional[int] = None

    @property
    def summary(self) -> str:
        """A two-line description of the archive layout."""
        if self.legacy:
            return (
                f" old debian package, version {self.version}.\n"
                f" size {self.size} bytes: control archive={self.control_length},"
                f" main archive={self.main_length}.\n"
            )
        return (
            f" new debian package, version {self.version}.\n"
            f" size {self.size} bytes: control archive={self.control_length} bytes.\n"
        )


def parse_deb_version(text: str) -> DebVersion:
    """Parse a ``major.minor`` format version, optionally ending in a newline."""
    text = text.split("\0", 1)[0]
    major_text, dot, rest = text.partition(".")
    if not dot:
        raise DebError("format version with no dot")
    if not _INT.fullmatch(major_text):
        raise DebError("format version with invalid major component")
    minor = _INT.match(rest)
    if minor is None:
        raise DebError("format version with invalid minor component")
    tail = rest[minor.end():]
    if tail and not tail.startswith("\n"):
        raise DebError("format version followed by junk")
    return DebVersion(int(major_text), int(minor.group()))


def compressor_from_extension(extension: str) -> Optional[Compressor]:
    """Return the compressor for a member name extension, or ``None``."""
    try:
        return Compressor(extension)
    except ValueError:
        return None


_DECOMPRESSORS: dict[Compressor, Callable[[bytes], bytes]] = {
    Compressor.NONE: bytes,
    Compressor.GZIP: gzip.decompress,
    Compressor.XZ: partial(lzma.decompress, format=lzma.FORMAT_XZ),
    Compressor.LZMA: partial(lzma.decompress, format=lzma.FORMAT_ALONE),
    Compressor.BZIP2: bz2.decompress,
}


def decompress(compressor: Compressor, data: bytes) -> bytes:
    """Decompress a member's bytes with ``compressor``."""
    try:
        return _DECOMPRESSORS[compressor](data)
    except (OSError, EOFError, ValueError, lzma.LZMAError, zlib.error) as exc:
        raise DebError(f"decompressing archive member: {exc}") from exc


def _read_line(stream: BinaryIO, min_size: int, max_size: int) -> bytes:
    """Read at least ``min_size`` bytes, then byte by byte up to a newline."""
    line = b""
    size = min_size
    while len(line) < max_size:
        chunk = stream.read(size)
        if not chunk:
            return line
        newline = chunk.find(b"\n")
        if newline >= 0:
            return line + chunk[: newline + 1]
        line += chunk
        size = 1
    return line


def _eof(filename: str, what: str) -> DebError:
    return DebError(f"unexpected end of file in {what} in {filename}")


def _normalize_name(raw: bytes) -> str:
    name = raw.rstrip(b" ")
    if name.endswith(b"/"):
        name = name[:-1]
    return name.split(b"\0", 1)[0].decode("latin-1")


def _member_size(filename: str, member: str, raw: bytes) -> int:
    digits = raw.lstrip(b" ").split(b" ", 1)[0]
    bad = next((byte for byte in digits if not 0x30 <= byte <= 0x39), None)
    if bad is not None:
        raise DebError(
            f"invalid character '{chr(bad)}' in archive '{filename}' member '{member}' size"
        )
    return int(digits) if digits else 0


def _archive_version(text: str) -> DebVersion:
    if "\n" not in text:
        raise DebError("archive has no newlines in header")
    try:
        return parse_deb_version(text)
    except DebError as exc:
        raise DebError(f"archive has invalid format version: {exc}") from exc


def _skip(stream: BinaryIO, length: int) -> None:
    stream.seek(length, os.SEEK_CUR)


def _read_new(stream: BinaryIO, filename: str, size: int, admininfo: int) -> DebPackage:
    version: Optional[DebVersion] = None
    control_length = 0
    admin = -1
    compressor: Optional[Compressor] = Compressor.GZIP

    while True:
        header = stream.read(_AR_HEADER_SIZE)
        if len(header) != _AR_HEADER_SIZE:
            raise _eof(filename, "archive member header")
        name = _normalize_name(header[:16])
        if header[58:60] != _AR_FMAG:
            raise DebError(f"file '{filename}' is corrupt - bad archive header magic")
        length = _member_size(filename, name, header[48:58])
        padded = length + (length & 1)

        if version is None:
            if name != DEB_MAGIC:
                raise DebError(
                    f"file '{filename}' is not a debian binary archive (try dpkg-split?)"
                )
            info = stream.read(padded)
            if len(info) != padded:
                raise _eof(filename, "archive information header member")
            version = _archive_version(info[:length].split(b"\0", 1)[0].decode("latin-1"))
            if version.major != 2:
                raise DebError(f"archive is format version {version}; get a newer dpkg-deb")
            continue

        if name.startswith("_"):
            _skip(stream, padded)
            continue

        if name.startswith(ADMIN_MEMBER):
            admin = 1
            compressor = compressor_from_extension(name[len(ADMIN_MEMBER):])
            if compressor not in (Compressor.NONE, Compressor.GZIP, Compressor.XZ):
                raise DebError(
                    f"archive '{filename}' uses unknown compression for member "
                    f"'{name}', giving up"
                )
        else:
            if admin != 1:
                raise DebError(
                    f"archive '{filename}' has premature member '{name}' before "
                    f"'{ADMIN_MEMBER}', giving up"
                )
            if not name.startswith(DATA_MEMBER):
                raise DebError(
                    f"archive '{filename}' has premature member '{name}' before "
                    f"'{DATA_MEMBER}', giving up"
                )
            admin = 0
            compressor = compressor_from_extension(name[len(DATA_MEMBER):])
            if compressor is None:
                raise DebError(
                    f"archive '{filename}' uses unknown compression for member "
                    f"'{name}', giving up"
                )

        if admin == 1:
            if control_length != 0:
                raise DebError(
                    f"archive '{filename}' contains two control members, giving up"
                )
            control_length = length

        if (admin == 0) != (admininfo == 0):
            _skip(stream, padded)
            continue

        assert compressor is not None
        return DebPackage(
            path=filename,
            version=version,
            size=size,
            control_length=control_length,
            member=DebMember(name, compressor, stream.tell(), length),
        )


def _read_old(
    stream: BinaryIO, filename: str, size: int, admininfo: int, first_line: bytes
) -> DebPackage:
    text = first_line.split(b"\0", 1)[0].decode("latin-1")
    version = _archive_version(text)
    line = _read_line(stream, 1, _CTRLLEN_BUF_MAX)
    match = _CTRLLEN.fullmatch(line.decode("latin-1"))
    if match is None or int(match.group(1)) < 0:
        raise DebError(
            f"archive has malformatted control member size '{line.decode('latin-1')}'"
        )
    control_length = int(match.group(1))
    main_length = size - control_length - len(line) - len(text)

    if admininfo:
        member = DebMember("control.tar.gz", Compressor.GZIP, stream.tell(), control_length)
    else:
        _skip(stream, control_length)
        member = DebMember("data.tar.gz", Compressor.GZIP, stream.tell(), main_length)

    return DebPackage(
        path=filename,
        version=version,
        size=size,
        control_length=control_length,
        member=member,
        legacy=True,
        main_length=main_length,
    )


def read_deb(path: PathLike, admininfo: int = 0) -> DebPackage:
    """Read the headers of a package and locate the member to unpack.

    With ``admininfo`` zero the data member is chosen, otherwise the control
    member; from 2 upwards a summary of the layout is printed as well.
    """
    filename = os.fspath(path)
    try:
        stream = open(filename, "rb")
    except OSError as exc:
        raise DebError(f"failed to read archive {filename}: {exc.strerror}") from exc

    with stream:
        try:
            size = os.fstat(stream.fileno()).st_size
            first = _read_line(stream, len(AR_MAGIC), _VERSION_BUF_MAX)
            if first == AR_MAGIC:
                package = _read_new(stream, filename, size, admininfo)
            elif first[:4] == b"0.93":
                package = _read_old(stream, filename, size, admininfo, first)
            else:
                if first.startswith(b"!<arch>"):
                    log.warning(
                        "file looks like it might be an archive which has been\n"
                        " corrupted by being downloaded in ASCII mode"
                    )
                raise DebError(f"'{filename}' is not a debian format archive")
        except OSError as exc:
            raise DebError(f"error reading archive {filename}: {exc}") from exc

    if admininfo >= 2:
        print(package.summary, end="")
    return package


def _read_member(filename: str, member: DebMember) -> bytes:
    if member.size < 0:
        raise DebError(
            f"cannot copy archive member from '{filename}' to decompressor pipe: "
            "negative member size"
        )
    try:
        with open(filename, "rb") as stream:
            stream.seek(member.offset)
            data = stream.read(member.size)
    except OSError as exc:
        raise DebError(f"failed to read archive {filename}: {exc}") from exc
    if len(data) != member.size:
        raise DebError(
            f"cannot copy archive member from '{filename}' to decompressor pipe: "
            "unexpected end of file or stream"
        )
    return data


class _KeepMtimeOut(tarfile.TarFile):
    """A tar reader that stamps extracted files with the current time."""

    def utime(self, tarinfo: tarfile.TarInfo, targetpath: str) -> None:
        try:
            os.utime(targetpath, None)
        except OSError as exc:
            raise tarfile.ExtractError("could not change modification time") from exc


def _ensure_dir(dest: Path) -> None:
    if dest.is_dir():
        return
    if dest.exists():
        raise DebError(f"failed to chdir to directory: {dest} is not a directory")
    try:
        dest.mkdir()
    except OSError as exc:
        raise DebError(f"failed to create directory: {exc.strerror}") from exc


def _untar(data: bytes, dest: Path) -> None:
    try:
        with _KeepMtimeOut.open(fileobj=io.BytesIO(data), mode="r:") as archive:
            if hasattr(tarfile, "tar_filter"):
                archive.extractall(dest, filter="tar")
            else:
                archive.extractall(dest)
    except (tarfile.TarError, OSError) as exc:
        raise DebError(f"tar: {exc}") from exc


def _move_control_files(dest: Path, subdir: str) -> None:
    source = dest / subdir
    try:
        entries = sorted(e for e in source.iterdir() if not e.name.startswith("."))
        if not entries:
            raise DebError(f"shell command to move files: nothing to move in {source}")
        for entry in entries:
            os.replace(entry, dest / entry.name)
        source.rmdir()
    except OSError as exc:
        raise DebError(f"shell command to move files failed: {exc}") from exc


def extract_deb(
    path: PathLike, dest: Optional[PathLike] = None, admininfo: int = 0
) -> DebPackage:
    """Unpack the data member (or with ``admininfo`` the control member) into ``dest``.

    ``dest`` defaults to ``extract`` under the working directory and is
    created if missing. Extracted files get the current time as mtime.
    """
    filename = os.fspath(path)
    package = read_deb(filename, admininfo)
    data = decompress(package.member.compressor, _read_member(filename, package.member))
    target = Path(dest) if dest is not None else Path.cwd() / "extract"
    _ensure_dir(target)
    _untar(data, target)

    if package.version.major == 0 and admininfo:
        minor = package.version.minor
        while minor and minor % 10 == 0:
            minor //= 10
        if minor == 931:
            _move_control_files(target, OLD_OLD_DEB_DIR)
        elif minor in (932, 933):
            _move_control_files(target, OLD_DEB_DIR)

    return package


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Unpack the package named on the command line into ./extract."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: extract-deb <archive.deb>", file=sys.stderr)
        return 2
    try:
        extract_deb(args[0], Path.cwd() / "extract", 0)
    except DebError as exc:
        print(f"extract-deb: error: {exc}", file=sys.stderr)
        return 2
    return 0