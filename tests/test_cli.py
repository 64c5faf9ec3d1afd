import io
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from rich.console import Console

import salph
from spelling.matcher import Matcher


@pytest.fixture(autouse=True)
def default_alphabet(monkeypatch):
    monkeypatch.delenv(salph.ALPHABET_ENV_VAR, raising=False)


@pytest.fixture
def fruit_dir(tmp_path):
    (tmp_path / "fruit").write_text("# Fruit\nA Apple\nB Banana\n", encoding="utf-8")
    return tmp_path


def output_lines(text):
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def test_spell_arguments(capsys):
    assert salph.main(["abc"]) == 0
    out = capsys.readouterr().out
    assert output_lines(out) == ["abc  Alpha Bravo Charlie"]


def test_spell_multiple_words(capsys):
    assert salph.main(["ab", "c1"]) == 0
    lines = output_lines(capsys.readouterr().out)
    assert lines[0].startswith("ab")
    assert lines[0].endswith("Alpha Bravo")
    assert lines[1].startswith("c1")
    assert lines[1].endswith("Charlie One")


def test_spell_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab  c\n"))
    assert salph.main([]) == 0
    lines = output_lines(capsys.readouterr().out)
    assert len(lines) == 2
    assert lines[0].endswith("Alpha Bravo")
    assert lines[1].endswith("Charlie")


def test_empty_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert salph.main([]) == 0
    assert capsys.readouterr().out == ""


def test_separator(capsys):
    assert salph.main(["-S", "-", "abc"]) == 0
    assert "Alpha-Bravo-Charlie" in capsys.readouterr().out


def test_alphabet_option(capsys):
    assert salph.main(["--alphabet", "de", "sch"]) == 0
    assert "Schule" in capsys.readouterr().out


def test_alphabet_from_environment(capsys, monkeypatch):
    monkeypatch.setenv(salph.ALPHABET_ENV_VAR, "es")
    assert salph.main(["ll"]) == 0
    assert "Llobregat" in capsys.readouterr().out


def test_unknown_alphabet(capsys):
    with pytest.raises(SystemExit) as exc_info:
        salph.main(["-a", "klingon", "abc"])
    assert exc_info.value.code == 2
    assert "Unknown alphabet: klingon" in capsys.readouterr().err


def test_unknown_alphabet_to_show(capsys):
    with pytest.raises(SystemExit):
        salph.main(["-s", "klingon"])
    assert "Unknown alphabet: klingon" in capsys.readouterr().err


def test_list_alphabets(capsys):
    assert salph.main(["--list-alphabets"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "Available alphabets:"
    assert "  - nato: NATO phonetic alphabet" in lines
    assert "  - de: German (DIN 5009)" in lines


def test_show_alphabet(capsys):
    assert salph.main(["-s", "nato"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == ["A Alpha", "B Bravo", "C Charlie"]
    assert "X X-ray" in lines


def test_strict_mode(capsys, caplog):
    assert salph.main(["--strict", "a-b"]) == 1
    assert "No symbol matches '-' at position 1" in caplog.text
    assert capsys.readouterr().out == ""


def test_non_strict_skips(capsys):
    assert salph.main(["a-b"]) == 0
    assert "Alpha Bravo" in capsys.readouterr().out


def test_alphabet_dir(capsys, fruit_dir):
    assert salph.main(["--alphabet-dir", str(fruit_dir), "-a", "fruit", "ab"]) == 0
    assert "Apple Banana" in capsys.readouterr().out


def test_list_includes_alphabet_dir(capsys, fruit_dir):
    assert salph.main(["--alphabet-dir", str(fruit_dir), "-l"]) == 0
    out = capsys.readouterr().out
    assert "  - fruit: Fruit" in out
    assert "  - nato: NATO phonetic alphabet" in out


def test_malformed_alphabet(caplog, fruit_dir):
    (fruit_dir / "broken").write_text("# Broken\nA\n", encoding="utf-8")
    assert salph.main(["--alphabet-dir", str(fruit_dir), "-a", "broken", "a"]) == 1
    assert "line 2" in caplog.text


def test_alphabet_not_utf8(capsys, caplog, fruit_dir):
    (fruit_dir / "latin1").write_bytes("# Latin1\nÄ Ärger\n".encode("latin-1"))
    assert salph.main(["--alphabet-dir", str(fruit_dir), "-l"]) == 1
    assert "UTF-8" in caplog.text
    assert "latin1" in caplog.text


def test_long_word_stays_on_one_line(capsys):
    assert salph.main(["abcdefghijklmnopqrstuvwxyz"]) == 0
    lines = output_lines(capsys.readouterr().out)
    assert len(lines) == 1
    assert lines[0].startswith("abcdefghijklmnopqrstuvwxyz  Alpha Bravo")
    assert lines[0].endswith("Yankee Zulu")


def test_version(capsys):
    assert salph.main(["--version"]) == 0
    out = capsys.readouterr().out
    assert f"salph: {salph.__version__}" in out
    assert "lark:" in out


def test_read_sentence():
    assert salph.read_sentence(io.StringIO("hello  world\nignored\n")) == ["hello", "world"]


class TestFormatting:
    """Test the rich renderables built for the output table."""

    def setup_method(self):
        self.matcher = Matcher.build([("a", "Alpha"), ("1", "One")])

    def test_format_spellings_colors(self):
        text = salph.format_spellings(self.matcher.match("a1"), " ", color=True)
        assert text.plain == "Alpha One"
        styles = [(span.start, span.end, span.style) for span in text.spans]
        assert styles == [(0, 5, salph.SPELLING_STYLE), (6, 9, salph.NUMBER_STYLE)]

    def test_format_spellings_without_color(self):
        text = salph.format_spellings(self.matcher.match("a1"), ", ", color=False)
        assert text.plain == "Alpha, One"
        assert text.spans == []

    def test_format_spellings_empty(self):
        assert salph.format_spellings([], " ").plain == ""

    def test_build_table(self):
        table = salph.build_table(self.matcher, ["a1", "xa"], color=False)
        console = Console(file=io.StringIO(), width=80, color_system=None)
        console.print(table)
        lines = output_lines(console.file.getvalue())
        assert lines == ["a1  Alpha One", "xa  Alpha"]

    def test_build_table_word_style(self):
        table = salph.build_table(self.matcher, ["a"], color=True)
        assert table.row_count == 1
        assert len(table.columns) == 2
