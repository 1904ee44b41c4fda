from pathlib import Path
from termhack.datasets import validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "terminal.txt"
    _write(p, ["SPIES", "SPITE", "SHINE", "SPINE 3"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 4
    assert rep["candidates"] == 3 and rep["witnesses"] == 1
    assert rep["lengths"] == [5]
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and "wit=1" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    p = tmp_path / "terminal.txt"
    # empty line, bad distance, and a short word
    p.write_text("SPIES\n\nSPINE x\nSHY\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert rep["lengths"] == [3, 5]
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("mixed word lengths" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_duplicates_are_reported_but_pass(tmp_path: Path):
    p = tmp_path / "terminal.txt"
    _write(p, ["SPIES", "SPIES", "SHINE"])

    rep = validate_wordlist(str(p))
    assert rep["passed"] is True
    assert rep["unique_count"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_validate_wordlist_counts_lines_like_the_reader(tmp_path: Path):
    p = tmp_path / "terminal.txt"
    # vertical tab and LINE SEPARATOR end a str.splitlines() line but not a reader line
    p.write_text("abcd\x0b\nefgh\u2028\n", encoding="utf-8")

    rep = validate_wordlist(str(p))
    assert rep["count"] == 2
    assert rep["invalid_lines"] == 0


def test_validate_wordlist_flags_undecodable_line(tmp_path: Path):
    p = tmp_path / "terminal.txt"
    p.write_bytes(b"SPIES\nSP\xffNE\nSHINE\n")

    rep = validate_wordlist(str(p))
    assert rep["passed"] is False
    assert rep["count"] == 2 and rep["invalid_lines"] == 1
    assert any("2:Input" in msg for msg in rep["issues"])


def test_validate_wordlist_directory_is_not_a_wordlist(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path))
    assert rep["exists"] is False and rep["passed"] is False
