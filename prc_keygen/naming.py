"""
prc_keygen.naming
-----------------
Maps a private key output pattern such as ``priv#.cxx`` and a trust level
to the concrete file that level's signing program is written to.

A '#' in the pattern is always replaced by the level. Without one, level 1
keeps the bare name (the single-key case) and every other level gets its
number appended before the extension.
"""

from __future__ import annotations
from dataclasses import dataclass

from .constants import PLACEHOLDER, SOURCE_EXTENSION
from .errors import InvalidArgument
from .utils import basename_wo_extension, split_extension


def check_extension(path: str, what: str) -> None:
    _, ext = split_extension(path)
    if ext != SOURCE_EXTENSION:
        raise InvalidArgument(
            f"{what} output file '{path}' should have a .{SOURCE_EXTENSION} extension."
        )


@dataclass(frozen=True)
class ResolvedName:
    path: str
    explicit_suffix: bool  # the level number appears in the name

    @property
    def progname(self) -> str:
        return basename_wo_extension(self.path)


@dataclass(frozen=True)
class OutputPattern:
    prefix: str
    suffix: str
    has_placeholder: bool

    @classmethod
    def from_path(cls, path: str) -> "OutputPattern":
        name, _ = split_extension(path)
        ext = "." + SOURCE_EXTENSION
        hash_pos = name.find(PLACEHOLDER)
        if hash_pos < 0:
            return cls(prefix=name, suffix=ext, has_placeholder=False)
        return cls(
            prefix=name[:hash_pos],
            suffix=name[hash_pos + 1:] + ext,
            has_placeholder=True,
        )

    def resolve(self, level: int) -> ResolvedName:
        explicit = self.has_placeholder or level != 1
        if explicit:
            return ResolvedName(f"{self.prefix}{level}{self.suffix}", True)
        return ResolvedName(f"{self.prefix}{self.suffix}", False)


def resolve(pattern: str, level: int) -> ResolvedName:
    return OutputPattern.from_path(pattern).resolve(level)
