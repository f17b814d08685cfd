"""Shell dialects for alias scrubbing.

Each dialect knows how to strip the shim's lines from one family of
shell configuration files and how to detect that some remain.
POSIX-style and Fish files are filtered line by line; PowerShell
profiles have function definitions cut out by brace matching, because a
definition can span several lines and nest blocks.
"""

import re
from abc import ABC, abstractmethod

from ccupdater.models.cleanup import ShimReference


class ShellDialect(ABC):
    """Abstract base class for shell configuration dialects.

    Attributes:
        shim: Shim footprint to remove.
        command: Local command name the shim aliased.
    """

    name: str = "shell"

    def __init__(self, shim: ShimReference, command: str) -> None:
        self.shim = shim
        self.command = command

    @abstractmethod
    def scrub(self, content: str) -> str:
        """Return ``content`` with the shim's lines removed."""

    @abstractmethod
    def references(self, content: str) -> bool:
        """Check if ``content`` still holds anything ``scrub`` would remove."""


class LineFilterDialect(ShellDialect):
    """Dialect that drops whole lines matching the shim footprint."""

    def __init__(self, shim: ShimReference, command: str) -> None:
        super().__init__(shim, command)
        self._alias = self._alias_pattern(command)

    @staticmethod
    @abstractmethod
    def _alias_pattern(command: str) -> re.Pattern[str]:
        """Pattern matching an alias definition for ``command``."""

    def matches(self, line: str) -> bool:
        """Check if a single line belongs to the shim footprint."""
        return (
            self.shim.package_name in line
            or line.strip().startswith(self.shim.marker)
            or self._alias.search(line) is not None
        )

    def scrub(self, content: str) -> str:
        """Drop matching lines, keeping order and line endings of the rest."""
        lines = content.split("\n")
        kept = [line for line in lines if not self.matches(line)]
        if len(kept) == len(lines):
            return content
        return "\n".join(kept)

    def references(self, content: str) -> bool:
        """Check if any line matches the shim footprint."""
        return any(self.matches(line) for line in content.split("\n"))


class PosixShellDialect(LineFilterDialect):
    """bash/zsh style files: ``alias claude="..."``."""

    name = "posix"

    @staticmethod
    def _alias_pattern(command: str) -> re.Pattern[str]:
        return re.compile(rf"\balias\s+{re.escape(command)}=")


class FishDialect(LineFilterDialect):
    """fish config: ``alias claude "..."`` or ``alias claude=...``."""

    name = "fish"

    @staticmethod
    def _alias_pattern(command: str) -> re.Pattern[str]:
        return re.compile(rf"\balias\s+{re.escape(command)}(?:=|\s)")


class PowerShellDialect(ShellDialect):
    """PowerShell profiles: ``function claude { ... }`` plus marker comments.

    Function bodies are matched by counting braces from the opening ``{``,
    so nested blocks are removed together with the definition. Profiles
    that never mention the shim are left untouched, so a user's own
    ``claude`` function survives.
    """

    name = "powershell"

    def __init__(self, shim: ShimReference, command: str) -> None:
        super().__init__(shim, command)
        eol = r"(?:\r?\n|$)"
        self._function_header = re.compile(
            rf"^[ \t]*function[ \t]+{re.escape(command)}(?![\w-])[^\r\n{{]*", re.M
        )
        self._line_patterns = (
            re.compile(rf"^[ \t]*{re.escape(shim.marker)}[^\r\n]*{eol}", re.M),
            re.compile(rf"^[^\r\n]*{re.escape(shim.package_name)}[^\r\n]*{eol}", re.M),
        )

    def scrub(self, content: str) -> str:
        """Remove function definitions, marker comments and lines naming the shim."""
        if not self.references(content):
            return content
        content = self._remove_functions(content)
        for pattern in self._line_patterns:
            content = pattern.sub("", content)
        return content

    def references(self, content: str) -> bool:
        """Check if the profile mentions the shim."""
        return self.shim.package_name in content

    def _remove_functions(self, content: str) -> str:
        """Cut every definition of the command, header through closing brace."""
        kept: list[str] = []
        position = 0
        for match in self._function_header.finditer(content):
            if match.start() < position:
                # Nested inside a definition already removed
                continue
            kept.append(content[position : match.start()])
            position = _definition_end(content, match.end())
        kept.append(content[position:])
        return "".join(kept)


def _line_end(content: str, index: int) -> int:
    """Index just past the line break following ``index``."""
    newline = content.find("\n", index)
    return len(content) if newline == -1 else newline + 1


def _definition_end(content: str, header_end: int) -> int:
    """Find where a function definition ends.

    The body starts at the first ``{`` after the header (possibly on a
    following line) and ends at its matching ``}``; the rest of that line
    goes with it. A header without a body, or with unbalanced braces,
    only loses its own line.
    """
    index = header_end
    while index < len(content) and content[index] in " \t\r\n":
        index += 1
    if index >= len(content) or content[index] != "{":
        return _line_end(content, header_end)

    depth = 0
    for index in range(index, len(content)):
        char = content[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return _line_end(content, index + 1)
    return _line_end(content, header_end)
