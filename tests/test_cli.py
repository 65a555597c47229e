"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from manifest_validator.cli import expand_manifest_paths, main


@pytest.fixture(autouse=True)
def no_ci_env(monkeypatch):
    monkeypatch.delenv("CI", raising=False)


def test_valid_manifest_exit_zero(version_schema, write_file, capsys):
    manifest = write_file("app.json", {"version": "1.0"})

    assert main([str(version_schema), str(manifest)]) == 0

    assert capsys.readouterr().out == "- app.json validates against the schema!\n"


def test_invalid_manifest_exit_one(version_schema, write_file, capsys):
    manifest = write_file("app.json", {"name": "x"})

    assert main([str(version_schema), str(manifest)]) == 1

    out = capsys.readouterr().out
    assert out.startswith("- app.json has 1 Error\n")
    assert "  - Error: 'version' is a required property" in out


def test_error_count_is_pluralized(version_schema, write_file, capsys):
    manifest = write_file("app.json", {"name": 1})

    main([str(version_schema), str(manifest)])

    assert "- app.json has 2 Errors" in capsys.readouterr().out


def test_ci_mode_from_environment(version_schema, write_file, capsys, monkeypatch):
    monkeypatch.setenv("CI", "True")
    good = write_file("good.json", {"version": "1.0"})
    bad = write_file("bad.json", {})

    assert main([str(version_schema), str(good), str(bad)]) == 1

    out = capsys.readouterr().out
    assert "      [+] good.json validates against the schema!" in out
    assert "      [-] bad.json has 1 Error" in out
    assert "  [*] Error: 'version' is a required property" in out


def test_no_ci_flag_overrides_environment(version_schema, write_file, capsys, monkeypatch):
    monkeypatch.setenv("CI", "true")
    manifest = write_file("app.json", {"version": "1.0"})

    main([str(version_schema), str(manifest), "--no-ci"])

    assert capsys.readouterr().out == "- app.json validates against the schema!\n"


def test_wildcards_are_expanded(version_schema, write_file, tmp_path, capsys):
    write_file("bucket/a.json", {"version": "1"})
    write_file("bucket/b.json", {"version": "2"})
    write_file("bucket/readme.txt", "not a manifest")

    assert main([str(version_schema), str(tmp_path / "bucket" / "*.json")]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "- a.json validates against the schema!",
        "- b.json validates against the schema!",
    ]


def test_pattern_without_matches(tmp_path, capsys):
    assert expand_manifest_paths([str(tmp_path / "*.yml")]) == []
    assert "No manifests match pattern" in capsys.readouterr().err


def test_schema_failure_stops_the_batch(tmp_path, write_file, capsys):
    first = write_file("a.json", {})
    second = write_file("b.json", {})

    assert main([str(tmp_path / "nope.json"), str(first), str(second)]) == 1

    out = capsys.readouterr().out
    assert out == "- a.json has 1 Error\nSchema file not found: nope.json\n"


def test_broken_manifest_is_scoped(version_schema, write_file, capsys):
    broken = write_file("broken.yml", "version: [1\n")
    good = write_file("good.yml", "version: '1.0'\n")

    assert main([str(version_schema), str(broken), str(good)]) == 1

    out = capsys.readouterr().out
    assert "- broken.yml has 1 Error\nbroken.yml: " in out
    assert "- good.yml validates against the schema!" in out


def test_usage_error_without_manifest(version_schema):
    with pytest.raises(SystemExit) as excinfo:
        main([str(version_schema)])
    assert excinfo.value.code == 2


def test_unreadable_manifest_is_scoped(version_schema, write_file, capsys, monkeypatch):
    bad = write_file("bad.json", {"version": "1.0"})
    good = write_file("good.json", {"version": "1.0"})
    read_text = Path.read_text

    def _read_text(self, *args, **kwargs):
        if self.name == "bad.json":
            raise PermissionError(13, "Permission denied", str(self))
        return read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", _read_text)

    assert main([str(version_schema), str(bad), str(good)]) == 1

    out = capsys.readouterr().out
    assert "- bad.json has 1 Error\nbad.json: Permission denied\n" in out
    assert "- good.json validates against the schema!" in out
