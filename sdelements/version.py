from __future__ import annotations

import re
from dataclasses import dataclass

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.|-([a-z][a-z-]*))(\d+)(?:\.(\d+))?$")


@dataclass(frozen=True)
class SoftwareVersion:
    """
    Dotted software version.

    Rendering:
      - "1.2.3"             no tag
      - "1.2-beta3"         tag "beta", patch 3
      - "1.2.3.4" / "1.2-beta3.4"  when build > 0

    parse() also accepts hyphens in a tag after its first letter ("rc-final"),
    so hyphenated tags round-trip; a letters-only tag is the common case.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    tag: str = ""
    build: int = 0

    def __str__(self) -> str:
        if self.tag:
            s = f"{self.major}.{self.minor}-{self.tag}{self.patch}"
        else:
            s = f"{self.major}.{self.minor}.{self.patch}"
        if self.build > 0:
            s += f".{self.build}"
        return s

    def is_zero(self) -> bool:
        return self == SoftwareVersion()

    @classmethod
    def parse(cls, text: str) -> "SoftwareVersion":
        m = _VERSION_RE.match(str(text).strip())
        if m is None:
            raise ValueError(f"invalid version {text!r}")
        major, minor, tag, patch, build = m.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch),
            tag=tag or "",
            build=int(build) if build else 0,
        )
