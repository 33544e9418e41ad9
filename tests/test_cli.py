from click.testing import CliRunner

from tinytemple import __version__
from tinytemple.cli import cli


def write_site(root):
    (root / "content").mkdir()
    (root / "static").mkdir()
    (root / "tinytemple.toml").write_text('title = "Hi"\n', encoding="utf-8")
    (root / "content" / "index.hbs").write_text("{{ title }}|{{ content }}", encoding="utf-8")
    (root / "content" / "index.md").write_text("# Welcome\n", encoding="utf-8")
    (root / "static" / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")


def test_cli_build_with_defaults(tmp_path, monkeypatch):
    write_site(tmp_path)
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, [], catch_exceptions=False)
    assert result.exit_code == 0
    assert "Finished. (" in result.output
    html = (tmp_path / "html" / "index.html").read_text(encoding="utf-8")
    assert html.startswith("Hi|<h1>Welcome</h1>")
    assert (tmp_path / "html" / "robots.txt").exists()


def test_cli_build_with_options(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    (source / "about.hbs").write_text("{{ name }}", encoding="utf-8")
    static = tmp_path / "assets"
    static.mkdir()
    config = tmp_path / "site.toml"
    config.write_text('name = "Temple"\n', encoding="utf-8")
    out = tmp_path / "public"

    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "--sourcedir",
            str(source),
            "--staticdir",
            str(static),
            "--outdir",
            str(out),
            "--config",
            str(config),
            "--verbose",
        ],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert (out / "about.html").read_text(encoding="utf-8") == "Temple"


def test_cli_missing_config_exits_nonzero(tmp_path, monkeypatch):
    write_site(tmp_path)
    (tmp_path / "tinytemple.toml").unlink()
    (tmp_path / "html").mkdir()
    (tmp_path / "html" / "keep.txt").write_text("keep", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, [])
    assert result.exit_code == 1
    assert "A fatal error has occurred." in result.output
    assert (tmp_path / "html" / "keep.txt").exists()


def test_cli_strict_render_error_is_not_fatal(tmp_path, monkeypatch):
    write_site(tmp_path)
    (tmp_path / "content" / "broken.hbs").write_text("{{ nope }}", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["--strict"])
    assert result.exit_code == 0
    assert not (tmp_path / "html" / "broken.html").exists()
    assert (tmp_path / "html" / "index.html").exists()


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_module_main_entrypoint():
    from tinytemple.__main__ import main

    assert callable(main)


def test_main_invokes_cli(monkeypatch):
    import tinytemple.cli as cli_mod

    called = {}

    def fake_cli():
        called["ran"] = True

    monkeypatch.setattr(cli_mod, "cli", fake_cli)
    cli_mod.main()
    assert called["ran"]
