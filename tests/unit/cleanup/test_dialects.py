"""Unit tests for shell dialects."""

import pytest
from ccupdater.cleanup.dialects import FishDialect, PosixShellDialect, PowerShellDialect
from ccupdater.models.cleanup import ShimReference


@pytest.fixture
def posix(shim: ShimReference) -> PosixShellDialect:
    return PosixShellDialect(shim, "claude")


class TestPosixShellDialect:
    """Tests for bash/zsh style scrubbing."""

    def test_drops_marker_alias_and_shim_lines(
        self, posix: PosixShellDialect, posix_profile_lines: list[str]
    ) -> None:
        """Only shim lines are dropped, user lines keep their order."""
        content = "\n".join(posix_profile_lines) + "\n"

        assert posix.scrub(content) == "export PATH=$HOME/.local/bin:$PATH\nexport EDITOR=vim\n"

    def test_preserves_crlf(self, posix: PosixShellDialect) -> None:
        """Windows line endings of kept lines are preserved."""
        content = "a\r\nalias claude='claude-code-updater'\r\nb\r\n"

        assert posix.scrub(content) == "a\r\nb\r\n"

    def test_unrelated_content_unchanged(self, posix: PosixShellDialect) -> None:
        """Content without shim lines is returned as-is."""
        content = "alias claudex='echo hi'\nalias ll='ls -l'\n"

        assert posix.scrub(content) == content
        assert posix.references(content) is False

    def test_indented_marker_matches(self, posix: PosixShellDialect) -> None:
        """Marker comments are recognized after leading whitespace."""
        assert posix.matches("   # Added by claude-code-updater") is True

    def test_references(self, posix: PosixShellDialect) -> None:
        """Any alias definition for the command counts as a reference."""
        assert posix.references("x\nalias claude=/opt/claude\n") is True


class TestFishDialect:
    """Tests for fish scrubbing."""

    @pytest.mark.parametrize(
        "line",
        ['alias claude "node /x/cli.js"', "alias claude=/x/cli.js"],
    )
    def test_drops_alias_forms(self, shim: ShimReference, line: str) -> None:
        """Both fish alias syntaxes are dropped."""
        dialect = FishDialect(shim, "claude")

        assert dialect.scrub(f"set -x EDITOR vim\n{line}\n") == "set -x EDITOR vim\n"

    def test_keeps_similar_names(self, shim: ShimReference) -> None:
        """Aliases for other commands survive."""
        dialect = FishDialect(shim, "claude")
        content = 'alias claude-dev "node /x/dev.js"\n'

        assert dialect.scrub(content) == content


class TestPowerShellDialect:
    """Tests for PowerShell profile scrubbing."""

    def test_removes_multiline_function_and_marker(self, shim: ShimReference) -> None:
        """A shim function block and its marker comment are removed."""
        dialect = PowerShellDialect(shim, "claude")
        content = (
            '$env:EDITOR = "code"\r\n'
            "# Added by claude-code-updater\r\n"
            "function claude {\r\n"
            '    node "C:\\npm\\node_modules\\claude-code-updater\\bin\\cli.js" @args\r\n'
            "}\r\n"
            "Set-Alias ll Get-ChildItem\r\n"
        )

        assert dialect.scrub(content) == '$env:EDITOR = "code"\r\nSet-Alias ll Get-ChildItem\r\n'

    def test_removes_single_line_function(self, shim: ShimReference) -> None:
        """One-line definitions are removed."""
        dialect = PowerShellDialect(shim, "claude")
        content = "function claude { claude-code-updater @args }\nWrite-Host hi\n"

        assert dialect.scrub(content) == "Write-Host hi\n"

    def test_user_function_untouched_without_shim(self, shim: ShimReference) -> None:
        """A profile that never mentions the shim is left alone."""
        dialect = PowerShellDialect(shim, "claude")
        content = "function claude { & 'C:\\tools\\claude.exe' @args }\n"

        assert dialect.scrub(content) == content
        assert dialect.references(content) is False

    def test_keeps_other_functions(self, shim: ShimReference) -> None:
        """Functions with a longer name are not matched."""
        dialect = PowerShellDialect(shim, "claude")
        content = "# Added by claude-code-updater\nfunction claude-dev { dev }\n"

        assert dialect.scrub(content) == "function claude-dev { dev }\n"

    def test_removes_function_with_nested_blocks(self, shim: ShimReference) -> None:
        """Nested braces in the body are removed with the definition."""
        dialect = PowerShellDialect(shim, "claude")
        content = (
            "# Added by claude-code-updater\n"
            "function claude {\n"
            "    if ($args) { node cli.js @args } else { node cli.js }\n"
            "}\n"
            "Write-Host hi\n"
        )

        assert dialect.scrub(content) == "Write-Host hi\n"

    def test_removes_function_with_brace_on_next_line(self, shim: ShimReference) -> None:
        """An opening brace on its own line still belongs to the definition."""
        dialect = PowerShellDialect(shim, "claude")
        content = (
            "function claude\n"
            "{\n"
            "    claude-code-updater @args\n"
            "}\n"
            "Set-Alias ll Get-ChildItem\n"
        )

        assert dialect.scrub(content) == "Set-Alias ll Get-ChildItem\n"
