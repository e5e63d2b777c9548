import re

from packaging.version import Version as _PackagingVersion

_VERSION_RE = re.compile(r"(?:[0-9]+\.)*[0-9]+")


class InvalidVersionError(ValueError):
    pass


class Version:
    """A dotted numeric version such as ``1``, ``1.2`` or ``1.2.3.4``.

    Ordering ignores trailing zero components, so ``1.0`` and ``1.0.0`` are equal.
    """

    def __init__(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("Version must be a string")

        if not _VERSION_RE.fullmatch(s):
            raise InvalidVersionError(f"Invalid version: {s!r}")

        self._numbers = tuple(int(part) for part in s.split("."))
        self._key = _PackagingVersion(".".join(str(n) for n in self._numbers))

    @property
    def version(self) -> str:
        return ".".join(str(n) for n in self._numbers)

    def is_greater_than(self, other: "Version") -> bool:
        return other < self

    def is_greater_or_equal_than(self, other: "Version") -> bool:
        return not self < other

    def __lt__(self, other: "Version") -> bool:
        assert isinstance(other, Version)
        return self._key < other._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        # Note: unlike the raw text, "1.0" and "1.0.0" are the same version here.
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Version({self.version!r})"

    def __str__(self) -> str:
        return self.version
