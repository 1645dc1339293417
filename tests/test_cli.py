"""Tests for the command-line entry point."""

import pytest

from css_inline_minifier.main import main

PAGE = '<style>.title{font-weight:bold}.unused{x:y}</style><h1 class="title">Hi</h1>'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("MINIFIER_EXTRA_WHITELIST", "MINIFIER_ALPHABET", "MINIFIER_OUTPUT_SUFFIX"):
        monkeypatch.delenv(var, raising=False)


def test_minify_writes_file(tmp_path):
    source = tmp_path / "index.html"
    source.write_text(PAGE, encoding="utf-8")

    assert main(["minify", str(source)]) == 0

    output = tmp_path / "index.min.html"
    assert output.read_text(encoding="utf-8") == '<style>.a{font-weight:bold}</style><h1 class="a">Hi</h1>'


def test_minify_stdout(tmp_path, capsys):
    source = tmp_path / "index.html"
    source.write_text(PAGE, encoding="utf-8")

    assert main(["minify", "--stdout", "--whitelist", "title", str(source)]) == 0

    out = capsys.readouterr().out
    assert out == '<style>.title{font-weight:bold}</style><h1 class="title">Hi</h1>'
    assert not (tmp_path / "index.min.html").exists()


def test_stdout_requires_single_file(tmp_path):
    one = tmp_path / "a.html"
    two = tmp_path / "b.html"
    one.write_text(PAGE, encoding="utf-8")
    two.write_text(PAGE, encoding="utf-8")

    assert main(["minify", "--stdout", str(one), str(two)]) == 1


def test_missing_input_fails(tmp_path):
    assert main(["minify", str(tmp_path / "nope.html")]) == 1


def test_invalid_alphabet_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("MINIFIER_ALPHABET", "aa")
    source = tmp_path / "index.html"
    source.write_text(PAGE, encoding="utf-8")

    assert main(["minify", str(source)]) == 1


def test_output_dir_and_suffix(tmp_path):
    source = tmp_path / "index.html"
    source.write_text(PAGE, encoding="utf-8")

    assert main(["minify", "--output-dir", str(tmp_path / "out"), str(source)]) == 0
    assert (tmp_path / "out" / "index.html").exists()

    assert main(["minify", "--suffix", ".small", str(source)]) == 0
    assert (tmp_path / "index.small.html").exists()


def test_suffix_read_from_environment_at_call_time(tmp_path, monkeypatch):
    source = tmp_path / "index.html"
    source.write_text(PAGE, encoding="utf-8")
    monkeypatch.setenv("MINIFIER_OUTPUT_SUFFIX", ".tiny")

    assert main(["minify", str(source)]) == 0
    assert (tmp_path / "index.tiny.html").exists()


def test_duplicate_outputs_fail(tmp_path):
    for folder in ("a", "b"):
        (tmp_path / folder).mkdir()
        (tmp_path / folder / "index.html").write_text(PAGE, encoding="utf-8")
    out_dir = tmp_path / "dist"

    inputs = [str(tmp_path / "a" / "index.html"), str(tmp_path / "b" / "index.html")]
    assert main(["minify", "--output-dir", str(out_dir), *inputs]) == 1
    assert not out_dir.exists()


def test_unwritable_output_dir_fails(tmp_path):
    source = tmp_path / "index.html"
    source.write_text(PAGE, encoding="utf-8")
    (tmp_path / "dist").write_text("not a directory", encoding="utf-8")

    assert main(["minify", "--output-dir", str(tmp_path / "dist"), str(source)]) == 1
