"""Unit tests for the tree printer.

Tests TreeFormat validation, line formatting, tree rendering and
printing to a stream.
"""

import io
import logging
from pathlib import Path

import pytest
from fsutil.filesystem.printer import (
    DEFAULT_TREE_FORMAT,
    TreeFormat,
    format_entry,
    print_tree,
    render_tree,
)
from pydantic import ValidationError

_original_is_dir = Path.is_dir


def _unreadable_is_dir(self: Path, *args: object, **kwargs: object) -> bool:
    if self.name == "secret":
        raise PermissionError(13, "Permission denied", str(self))
    return _original_is_dir(self, *args, **kwargs)


NAME_ONLY = TreeFormat(line_template="{indent}{marker}{name}")


class TestTreeFormat:
    """Tests for TreeFormat Pydantic model."""

    def test_default_values(self) -> None:
        """TreeFormat has the documented defaults."""
        fmt = TreeFormat()

        assert fmt.indent == "| "
        assert fmt.directory_marker == "+ "
        assert fmt.file_marker == ""
        assert fmt.line_template == "{indent}{marker}{name:<25} ({length} bytes)"
        assert fmt == DEFAULT_TREE_FORMAT

    def test_is_immutable(self) -> None:
        """Fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            DEFAULT_TREE_FORMAT.indent = "  "  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Extra keys are rejected."""
        with pytest.raises(ValidationError):
            TreeFormat(colour="red")  # type: ignore[call-arg]

    def test_rejects_unknown_template_field(self) -> None:
        """Templates may only reference indent, marker, name and length."""
        with pytest.raises(ValidationError, match="unknown field"):
            TreeFormat(line_template="{indent}{owner}")

    def test_rejects_positional_template_field(self) -> None:
        """Positional fields are not supplied."""
        with pytest.raises(ValidationError, match="unknown field"):
            TreeFormat(line_template="{0}")

    def test_rejects_malformed_template(self) -> None:
        """Unbalanced braces are rejected."""
        with pytest.raises(ValidationError, match="invalid"):
            TreeFormat(line_template="{name")

    @pytest.mark.parametrize("template", ["{name.foo}", "{length[0]}", "{name[x]}", "{length:s}"])
    def test_rejects_templates_that_fail_to_format(self, template: str) -> None:
        """Attribute, index and conversion errors surface as validation errors."""
        with pytest.raises(ValidationError, match="line_template"):
            TreeFormat(line_template=template)

    def test_accepts_custom_values(self) -> None:
        """Every field can be customized."""
        fmt = TreeFormat(
            indent="    ",
            directory_marker="[D] ",
            file_marker="[F] ",
            line_template="{indent}{marker}{name} {length}",
        )

        assert fmt.indent == "    "
        assert fmt.file_marker == "[F] "


class TestFormatEntry:
    """Tests for format_entry."""

    def test_file_at_depth_one(self, sample_tree: Path) -> None:
        """A file line carries the indent, file marker, padded name and size."""
        line = format_entry(sample_tree / "x.txt", 1)

        assert line == "| " + "x.txt".ljust(25) + " (3 bytes)"

    def test_directory_marker(self, sample_tree: Path) -> None:
        """A directory line carries the directory marker."""
        line = format_entry(sample_tree, 0)

        assert line.startswith("+ root ")
        assert line.endswith(" bytes)")

    def test_indent_repeats_per_depth(self, sample_tree: Path) -> None:
        """The indent unit is repeated once per level."""
        line = format_entry(sample_tree / "x.txt", 3, NAME_ONLY)

        assert line == "| | | x.txt"

    def test_missing_path_has_zero_length(self, tmp_path: Path) -> None:
        """An entry whose size cannot be read reports zero."""
        fmt = TreeFormat(line_template="{name}:{length}")

        assert format_entry(tmp_path / "gone.txt", 0, fmt) == "gone.txt:0"


class TestRenderTree:
    """Tests for render_tree."""

    def test_sample_tree(self, sample_tree: Path) -> None:
        """Root at depth 0, then x.txt and sub indented once."""
        lines = render_tree(sample_tree)

        assert len(lines) == 3
        assert lines[0].startswith("+ root")
        assert sorted(lines[1:]) == sorted(
            [
                "| " + "x.txt".ljust(25) + " (3 bytes)",
                format_entry(sample_tree / "sub", 1),
            ]
        )
        assert format_entry(sample_tree / "sub", 1).startswith("| + sub")

    def test_missing_root_renders_nothing(self, tmp_path: Path) -> None:
        """A missing root produces no lines."""
        assert render_tree(tmp_path / "missing") == []

    def test_file_root(self, sample_tree: Path) -> None:
        """A file root renders a single unindented line."""
        assert render_tree(sample_tree / "x.txt", NAME_ONLY) == ["x.txt"]

    def test_children_follow_their_directory(self, nested_tree: Path) -> None:
        """Each line's children sit directly below it at one more level."""
        lines = render_tree(nested_tree, NAME_ONLY)

        assert len(lines) == 7
        assert lines[0] == "+ top"
        low = lines.index("| | + low")
        assert lines[low + 1] == "| | | c.txt"
        assert lines.index("| + mid") < lines.index("| | b.txt")

    def test_unreadable_child_skipped(
        self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A child whose type cannot be read is left out, the rest still renders."""
        (sample_tree / "secret").mkdir()
        monkeypatch.setattr(Path, "is_dir", _unreadable_is_dir)

        lines = render_tree(sample_tree, NAME_ONLY)

        assert sorted(lines) == ["+ root", "| + sub", "| x.txt"]

    def test_unreadable_root_renders_nothing(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A root whose type cannot be read renders nothing."""
        (tmp_path / "secret").write_text("x")
        monkeypatch.setattr(Path, "is_dir", _unreadable_is_dir)

        assert render_tree(tmp_path / "secret") == []

    def test_format_failure_falls_back_to_default(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A line the template cannot format uses the default template instead."""
        big = tmp_path / "big.bin"
        with open(big, "wb") as f:
            f.truncate(0x110000)
        fmt = TreeFormat(line_template="{name}{length:c}")

        with caplog.at_level(logging.WARNING, logger="fsutil.filesystem.printer"):
            lines = render_tree(big, fmt)

        assert lines == ["big.bin".ljust(25) + f" ({0x110000} bytes)"]
        assert "Cannot format" in caplog.text


class TestPrintTree:
    """Tests for print_tree."""

    def test_writes_lines_to_stream(self, sample_tree: Path) -> None:
        """Every rendered line is written to the given stream."""
        out = io.StringIO()

        print_tree(sample_tree, NAME_ONLY, file=out)

        assert sorted(out.getvalue().splitlines()) == ["+ root", "| + sub", "| x.txt"]

    def test_defaults_to_stdout(
        self, sample_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Without a stream the tree goes to standard output."""
        print_tree(sample_tree / "x.txt")

        assert capsys.readouterr().out == "x.txt".ljust(25) + " (3 bytes)\n"

    def test_missing_root_prints_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A missing root prints nothing."""
        print_tree(tmp_path / "missing")

        assert capsys.readouterr().out == ""
