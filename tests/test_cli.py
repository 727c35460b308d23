"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from palette_cli.cli import main
from palette_cli.config import Config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Config pointing at an isolated themes directory."""
    themes_dir = tmp_path / "themes"
    themes_dir.mkdir()
    path = tmp_path / "config.yaml"
    path.write_text(f"themes_dir: {themes_dir}\ncss_prefix: null\n")
    Config._instance = None
    yield path
    Config._instance = None


def invoke(runner, config_file, *args):
    return runner.invoke(main, ["--config", str(config_file), "theme", *args])


class TestListCommand:
    """Test `theme list`."""

    def test_lists_builtins(self, runner, config_file):
        """Test built-in themes are listed."""
        result = invoke(runner, config_file, "list")
        assert result.exit_code == 0
        assert "tokyonight" in result.output
        assert "dracula" in result.output

    def test_style_filter(self, runner, config_file):
        """Test filtering by style."""
        result = invoke(runner, config_file, "list", "--style", "light")
        assert result.exit_code == 0
        assert "one_light" in result.output
        assert "dracula" not in result.output

    def test_includes_custom_themes_dir(self, runner, config_file, make_theme_source):
        """Test themes in the configured directory are registered."""
        themes_dir = config_file.parent / "themes"
        (themes_dir / "mine.yaml").write_text(make_theme_source("mine", {"background": "#000000"}))

        result = invoke(runner, config_file, "list")
        assert result.exit_code == 0
        assert "mine" in result.output


class TestExportCommands:
    """Test `theme css` and `theme json`."""

    def test_css(self, runner, config_file):
        """Test CSS output."""
        result = invoke(runner, config_file, "css", "tokyonight")
        assert result.exit_code == 0
        assert "  --bg: #1A1B26;\n" in result.output

    def test_css_prefix_and_root(self, runner, config_file):
        """Test CSS prefix and :root wrapping."""
        result = invoke(runner, config_file, "css", "tokyonight", "--prefix", "tn", "--root")
        assert result.exit_code == 0
        assert result.output.startswith(":root {\n")
        assert "  --tn-fg: #C0CAF5;\n" in result.output

    def test_json(self, runner, config_file):
        """Test JSON output parses."""
        result = invoke(runner, config_file, "json", "nord")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["meta"]["preset_id"] == "nord"
        assert data["base"]["background"] == "#2E3440"

    def test_unknown_theme(self, runner, config_file):
        """Test an unknown id exits with status 1."""
        result = invoke(runner, config_file, "css", "nonexistent")
        assert result.exit_code == 1


class TestShowCommand:
    """Test `theme show`."""

    def test_show_builtin(self, runner, config_file):
        """Test slot table output."""
        result = invoke(runner, config_file, "show", "tokyonight")
        assert result.exit_code == 0
        assert "base.background" in result.output
        assert "#1A1B26" in result.output

    def test_show_file(self, runner, config_file, write_theme, make_theme_source):
        """Test showing a theme file."""
        path = write_theme("solo.yaml", make_theme_source("solo", {"background": "#123456"}))
        result = invoke(runner, config_file, "show", "--file", str(path))
        assert result.exit_code == 0
        assert "#123456" in result.output

    def test_show_invalid_hex(self, runner, config_file, write_theme):
        """Test a bad value reports its slot and exits 1."""
        path = write_theme("bad.yaml", 'base:\n  background: "#12345"\n')
        result = invoke(runner, config_file, "show", "--file", str(path))
        assert result.exit_code == 1
        assert "[base].background" in result.output


class TestValidateCommand:
    """Test `theme validate`."""

    def test_passing_theme(self, runner, config_file, make_theme_source):
        """Test a high-contrast theme validates cleanly."""
        themes_dir = config_file.parent / "themes"
        (themes_dir / "stark.yaml").write_text(
            make_theme_source("stark", {"background": "#000000", "foreground": "#FFFFFF"})
        )
        result = invoke(runner, config_file, "validate", "stark")
        assert result.exit_code == 0
        assert "no contrast violations" in result.output

    def test_failing_theme(self, runner, config_file, make_theme_source):
        """Test violations are listed and exit with status 1."""
        themes_dir = config_file.parent / "themes"
        (themes_dir / "murky.yaml").write_text(
            make_theme_source("murky", {"background": "#121212", "foreground": "#111111"})
        )
        result = invoke(runner, config_file, "validate", "murky", "--level", "aa")
        assert result.exit_code == 1
        assert "base.foreground" in result.output

    def test_invalid_level(self, runner, config_file):
        """Test unknown levels are rejected by the option parser."""
        result = invoke(runner, config_file, "validate", "tokyonight", "--level", "zzz")
        assert result.exit_code == 2


class TestColorCommands:
    """Test `theme contrast`, `theme adjust` and `theme blend`."""

    def test_contrast(self, runner, config_file):
        """Test ratio output for black on white."""
        result = invoke(runner, config_file, "contrast", "#000000", "#FFFFFF")
        assert result.exit_code == 0
        assert "21.00:1" in result.output
        assert "pass" in result.output

    def test_contrast_invalid_color(self, runner, config_file):
        """Test a bad color exits 1."""
        result = invoke(runner, config_file, "contrast", "black", "#FFFFFF")
        assert result.exit_code == 1

    def test_adjust_rotate(self, runner, config_file):
        """Test hue rotation."""
        result = invoke(runner, config_file, "adjust", "#FF0000", "--rotate", "180")
        assert result.exit_code == 0
        assert result.output.strip() == "#00FFFF"

    def test_adjust_lighten(self, runner, config_file):
        """Test lightening black."""
        result = invoke(runner, config_file, "adjust", "#000000", "--lighten", "0.5")
        assert result.output.strip() == "#808080"

    def test_blend(self, runner, config_file):
        """Test blending red over blue."""
        result = invoke(runner, config_file, "blend", "#FF0000", "#0000FF", "0.5")
        assert result.exit_code == 0
        assert result.output.strip() == "#800080"


class TestMarkupInThemeText:
    """Test theme text containing rich markup characters is printed literally."""

    def test_list_bracketed_id_and_style(self, runner, config_file):
        """Test ids and styles with brackets are listed, including the default theme."""
        themes_dir = config_file.parent / "themes"
        (themes_dir / "odd.yaml").write_text(
            'meta:\n  name: "Odd"\n  preset_id: "odd[/b]"\n  schema_version: "1"\n'
            '  style: "[dim]"\n  kind: custom\n'
            'base:\n  background: "#000000"\n'
        )
        with config_file.open("a") as f:
            f.write('default_theme: "odd[/b]"\n')

        result = invoke(runner, config_file, "list")
        assert result.exit_code == 0
        assert "odd[/b]" in result.output
        assert "[dim]" in result.output

    def test_show_bracketed_platform_name(self, runner, config_file, write_theme):
        """Test a platform name with brackets appears verbatim in the slot column."""
        path = write_theme(
            "plat.yaml",
            'base:\n  background: "#000000"\n'
            'platform:\n  "x[/y]":\n    background: "#101010"\n',
        )
        result = invoke(runner, config_file, "show", "--file", str(path))
        assert result.exit_code == 0
        assert "platform.x[/y].background" in result.output


class TestFileOption:
    """Test exporting and validating standalone theme files."""

    def test_css_file(self, runner, config_file, write_theme, make_theme_source):
        """Test CSS export from a file."""
        path = write_theme("solo.yaml", make_theme_source("solo", {"background": "#123456"}))
        result = invoke(runner, config_file, "css", "--file", str(path))
        assert result.exit_code == 0
        assert result.output == "  --bg: #123456;\n"

    def test_json_file_with_sibling_parent(self, runner, config_file, write_theme, make_theme_source):
        """Test a file inheriting from a sibling file resolves through it."""
        write_theme("parent_theme.yaml", make_theme_source("parent_theme", {"foreground": "#EEEEEE"}))
        path = write_theme(
            "child.yaml",
            make_theme_source("child", {"background": "#111111"}, inherits="parent_theme"),
        )
        result = invoke(runner, config_file, "json", "--file", str(path))
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["meta"]["preset_id"] == "child"
        assert data["base"]["background"] == "#111111"
        assert data["base"]["foreground"] == "#EEEEEE"

    def test_validate_file(self, runner, config_file, write_theme, make_theme_source):
        """Test contrast validation of a file."""
        path = write_theme(
            "murky.yaml",
            make_theme_source("murky", {"background": "#121212", "foreground": "#111111"}),
        )
        result = invoke(runner, config_file, "validate", "--file", str(path))
        assert result.exit_code == 1
        assert "base.foreground" in result.output

    def test_missing_id_and_file(self, runner, config_file):
        """Test omitting both the id and --file is a usage error."""
        result = invoke(runner, config_file, "css")
        assert result.exit_code == 2
