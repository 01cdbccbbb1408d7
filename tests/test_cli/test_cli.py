"""Tests for the unclassify command line."""

import json

from click.testing import CliRunner

from unclassify import __version__
from unclassify.cli.main import cli


def _project(tmp_path, css=".foo { color: red; }", html='<div class="foo bar"></div>'):
    style = tmp_path / "style.css"
    page = tmp_path / "page.html"
    style.write_text(css)
    page.write_text(html)
    return style, page


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class TestGroup:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "clean" in result.output
        assert "classes" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"unclassify, version {__version__}" in result.output


# ---------------------------------------------------------------------------
# clean
# ---------------------------------------------------------------------------


class TestClean:
    def test_overwrite(self, tmp_path):
        style, page = _project(tmp_path)
        result = CliRunner().invoke(cli, ["clean", str(page), "-s", str(style), "--overwrite"])
        assert result.exit_code == 0, result.output
        assert page.read_text() == '<div class="foo"></div>'
        assert "div .foo .bar - bar" in result.output
        assert "Removed 1 out of 2 classes." in result.output
        assert "Classes removed: bar" in result.output
        assert "[TOTAL] Removed 1 out of 2 classes." in result.output

    def test_nothing_removed(self, tmp_path):
        style, page = _project(tmp_path, html='<div class="foo"></div>')
        result = CliRunner().invoke(cli, ["clean", str(page), "-s", str(style), "--overwrite"])
        assert result.exit_code == 0
        assert "[TOTAL] No classes removed." in result.output

    def test_dry_run(self, tmp_path):
        style, page = _project(tmp_path)
        result = CliRunner().invoke(cli, ["clean", str(page), "-s", str(style), "--dry"])
        assert result.exit_code == 0
        assert page.read_text() == '<div class="foo bar"></div>'
        assert "DRY mode on. No files written." in result.output

    def test_dest_directory(self, tmp_path):
        style, page = _project(tmp_path)
        out = tmp_path / "dist"
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(style), "--dest", str(out) + "/"]
        )
        assert result.exit_code == 0, result.output
        assert (out / "page.html").read_text() == '<div class="foo"></div>'
        assert page.read_text() == '<div class="foo bar"></div>'

    def test_glob_patterns(self, tmp_path):
        (tmp_path / "a.css").write_text(".a { }")
        (tmp_path / "b.css").write_text(".b { }")
        page = tmp_path / "page.html"
        page.write_text('<p class="a b c"></p>')
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(tmp_path / "*.css"), "--overwrite"]
        )
        assert result.exit_code == 0
        assert page.read_text() == '<p class="a b"></p>'

    def test_missing_stylesheet_warns(self, tmp_path):
        _, page = _project(tmp_path)
        missing = tmp_path / "missing.css"
        result = CliRunner().invoke(cli, ["clean", str(page), "-s", str(missing), "--dry"])
        assert result.exit_code == 0
        assert f'Source file "{missing}" not found.' in result.output

    def test_stylesheet_error_exits(self, tmp_path):
        style, page = _project(tmp_path, css=".foo { color: red;")
        result = CliRunner().invoke(cli, ["clean", str(page), "-s", str(style), "--overwrite"])
        assert result.exit_code == 1
        assert "Stylesheet error" in result.output
        assert page.read_text() == '<div class="foo bar"></div>'

    def test_no_target_is_configuration_error(self, tmp_path):
        style, page = _project(tmp_path)
        result = CliRunner().invoke(cli, ["clean", str(page), "-s", str(style)])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_config_file_error(self, tmp_path):
        style, page = _project(tmp_path)
        config = tmp_path / "unclassify.json"
        config.write_text(json.dumps({"presets": {"tailwind": True}, "overwrite": True}))
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(style), "--config", str(config)]
        )
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_config_file_options(self, tmp_path):
        style, page = _project(tmp_path, html='<div class="foo bar keep"></div>')
        config = tmp_path / "unclassify.json"
        config.write_text(
            json.dumps({"stylesheets": [str(style)], "custom_classes": "keep", "overwrite": True})
        )
        result = CliRunner().invoke(cli, ["clean", str(page), "--config", str(config)])
        assert result.exit_code == 0, result.output
        assert page.read_text() == '<div class="foo keep"></div>'

    def test_command_line_overrides_config(self, tmp_path):
        style, page = _project(tmp_path)
        config = tmp_path / "unclassify.json"
        config.write_text(json.dumps({"stylesheets": [str(style)], "overwrite": True}))
        result = CliRunner().invoke(
            cli, ["clean", str(page), "--config", str(config), "--no-overwrite", "--dry"]
        )
        assert result.exit_code == 0
        assert page.read_text() == '<div class="foo bar"></div>'

    def test_js_prefix(self, tmp_path):
        style, page = _project(tmp_path, html='<div class="foo hook-x js-y"></div>')
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(style), "--js-prefix", "hook-", "--overwrite"]
        )
        assert result.exit_code == 0
        assert page.read_text() == '<div class="foo hook-x"></div>'

    def test_knockout(self, tmp_path):
        html = '<script type="text/html"><b class="foo bar"></b></script>'
        style, page = _project(tmp_path, html=html)
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(style), "--knockout", "--overwrite"]
        )
        assert result.exit_code == 0
        assert page.read_text() == '<script type="text/html"><b class="foo"></b></script>'

    def test_bootstrap_flag(self, tmp_path):
        style, page = _project(tmp_path, html='<a class="active ghost"></a>')
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(style), "--bootstrap", "--overwrite"]
        )
        assert result.exit_code == 0
        assert page.read_text() == '<a class="active"></a>'

    def test_verbose_lists_classes(self, tmp_path):
        style, page = _project(tmp_path)
        result = CliRunner().invoke(
            cli, ["clean", str(page), "-s", str(style), "--dry", "-v"]
        )
        assert result.exit_code == 0
        assert "Found 1 classes: foo" in result.output

    def test_parallel_jobs(self, tmp_path):
        style = tmp_path / "style.css"
        style.write_text(".foo { }")
        pages = []
        for i in range(5):
            page = tmp_path / f"p{i}.html"
            page.write_text('<i class="foo x"></i>')
            pages.append(str(page))
        result = CliRunner().invoke(
            cli, ["clean", *pages, "-s", str(style), "--overwrite", "-j", "3"]
        )
        assert result.exit_code == 0
        assert "[TOTAL] Removed 5 out of 10 classes." in result.output


# ---------------------------------------------------------------------------
# classes
# ---------------------------------------------------------------------------


class TestClasses:
    def test_lists_sorted(self, tmp_path):
        style = tmp_path / "style.css"
        style.write_text(".zeta { } @media print { .alpha { } }")
        result = CliRunner().invoke(
            cli, ["classes", "-s", str(style), "--custom-classes", "mid"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["alpha", "mid", "zeta"]

    def test_preset(self, tmp_path):
        style = tmp_path / "style.css"
        style.write_text("")
        result = CliRunner().invoke(cli, ["classes", "-s", str(style), "--html5bp"])
        assert result.exit_code == 0
        assert "clearfix" in result.output.splitlines()

    def test_stylesheet_error(self, tmp_path):
        style = tmp_path / "style.css"
        style.write_text("}")
        result = CliRunner().invoke(cli, ["classes", "-s", str(style)])
        assert result.exit_code == 1
