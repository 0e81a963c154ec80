from io import StringIO

import pytest

from pyrpgini.ini import IniParser, IniReadError, IniSection


def scan(text: str) -> list[IniSection]:
    return list(IniParser.readstream(StringIO(text)))


def test_sections_in_encounter_order():
    sections = scan("[A]\nK1=V1\n[B]\nK2=V2\n")
    assert [s.name for s in sections] == ["A", "B"]
    assert sections[0].to_dict() == {"K1": "V1"}
    assert sections[1].to_dict() == {"K2": "V2"}


def test_no_header_yields_nothing():
    assert scan("") == []
    assert scan("Key=Value\n\n; comment\n") == []


def test_pairs_before_first_header_are_ignored():
    sections = scan("Orphan=1\n[A]\nKey=2\n")
    assert len(sections) == 1
    assert sections[0].to_dict() == {"Key": "2"}


def test_last_section_committed_without_pairs():
    sections = scan("[A]\nK=V\n[Empty]")
    assert [s.name for s in sections] == ["A", "Empty"]
    assert len(sections[1]) == 0


def test_header_name_is_verbatim():
    sections = scan("[ Heavy Sword ]\n[]\n")
    assert [s.name for s in sections] == [" Heavy Sword ", ""]


def test_header_needs_exact_brackets():
    # leading whitespace or trailing text makes it no header at all
    sections = scan("[A]\n [B]\n[C] ; note\nK=V\n")
    assert [s.name for s in sections] == ["A"]
    assert sections[0].to_dict() == {"K": "V"}


def test_value_keeps_extra_equals_and_spaces():
    sections = scan("[A]\nFormula = a=b\n")
    assert sections[0].to_dict() == {"Formula ": " a=b"}


def test_crlf_line_endings():
    sections = scan("[A]\r\nValue=1\r\n")
    assert sections[0].name == "A"
    assert sections[0]["Value"] == "1"


def test_duplicated_headers_stay_apart():
    sections = scan("[A]\nK=1\n[A]\nK=2\n")
    assert [s["K"] for s in sections] == ["1", "2"]


def test_read_file(tmp_path):
    fn = tmp_path / "a.ini"
    fn.write_text("[A]\nK=V\n", encoding="utf-8")
    assert IniParser(str(fn), "utf-8").read() == [IniSection("A", [("K", "V")])]


def test_read_missing_file_is_wrapped(tmp_path):
    with pytest.raises(IniReadError) as info:
        IniParser(str(tmp_path / "nope.ini")).read()
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_read_falls_back_to_detected_encoding(tmp_path):
    fn = tmp_path / "utf8.ini"
    fn.write_bytes("[屠龙宝刀]\n描述=屠龙宝刀点击就送\n".encode("utf-8"))
    sections = IniParser(str(fn), "ascii").read()
    assert sections[0].name == "屠龙宝刀"
    assert sections[0]["描述"] == "屠龙宝刀点击就送"


def test_write_then_read(tmp_path):
    fn = tmp_path / "sub" / "out.ini"
    parser = IniParser(str(fn), "utf-8")
    parser.write([
        IniSection("Party", [("Name", "x")]),
        IniSection("Members", [("0", "a"), ("1", "b")]),
    ])
    assert fn.read_text(encoding="utf-8") == (
        "[Party]\nName=x\n\n[Members]\n0=a\n1=b\n\n")
    assert [s.name for s in parser.read()] == ["Party", "Members"]
