"""Single-wildcard path patterns for version-manager install trees.

A pattern such as ``~/.nvm/versions/node/*/bin/claude`` has one
variable path segment. Expansion lists the directory before the
wildcard and substitutes every entry, which needs no glob matching and
behaves the same on every platform.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path, PurePath

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A path with at most one whole-segment wildcard.

    Attributes:
        prefix: Directory whose entries fill the variable segment.
        suffix: Path parts following the variable segment.
        variable: True if the pattern contains a wildcard segment.
    """

    prefix: Path
    suffix: tuple[str, ...] = ()
    variable: bool = False

    @classmethod
    def parse(cls, pattern: str | PurePath) -> "PathPattern":
        """Parse a pattern string.

        Args:
            pattern: Literal path, or a path with one ``*`` segment.

        Returns:
            Parsed PathPattern.

        Raises:
            ValueError: If the pattern has more than one wildcard, or a
                wildcard that is not a whole path segment.
        """
        parts = Path(pattern).parts
        wildcard_parts = [i for i, part in enumerate(parts) if WILDCARD in part]

        if not wildcard_parts:
            return cls(prefix=Path(*parts))
        if len(wildcard_parts) > 1 or str(pattern).count(WILDCARD) > 1:
            msg = f"Pattern must contain at most one wildcard: {pattern}"
            raise ValueError(msg)

        index = wildcard_parts[0]
        if parts[index] != WILDCARD:
            msg = f"Wildcard must be a whole path segment: {pattern}"
            raise ValueError(msg)
        if index == 0:
            msg = f"Wildcard cannot be the first path segment: {pattern}"
            raise ValueError(msg)

        return cls(prefix=Path(*parts[:index]), suffix=tuple(parts[index + 1 :]), variable=True)

    def substitute(self, segment: str) -> Path:
        """Build the literal path for one value of the variable segment."""
        return self.prefix.joinpath(segment, *self.suffix)

    def expand(self) -> Iterator[Path]:
        """Yield candidate literal paths for this pattern.

        Literal patterns yield themselves. Variable patterns yield one path
        per entry of the prefix directory, in sorted order, whether or not
        the resulting path exists. A missing prefix yields nothing.

        Raises:
            OSError: If the prefix directory exists but cannot be listed.
        """
        if not self.variable:
            yield self.prefix
            return

        if not self.prefix.is_dir():
            return

        for name in sorted(entry.name for entry in self.prefix.iterdir()):
            yield self.substitute(name)

    def __str__(self) -> str:
        if not self.variable:
            return str(self.prefix)
        return str(self.prefix.joinpath(WILDCARD, *self.suffix))
