"""End-to-end tests for the CSV to SRT pipeline."""
import re

import pytest

from csv_to_srt.convert import ConversionError, convert, convert_file, csv_to_srt
from csv_to_srt.models import ConvertOptions
from csv_to_srt.srt import parse_srt

KEEP_GAPS = ConvertOptions(remove_gaps=False)


def _count(srt):
    return len(re.findall(r"^\d+$", srt, flags=re.MULTILINE))


def test_basic_conversion():
    csv = ",00:00:00:13,00:00:02:06,運営します\n,00:00:02:06,00:00:03:29,言いますね"
    expected = (
        "1\n00:00:00,433 --> 00:00:02,200\n運営します\n"
        "\n"
        "2\n00:00:02,200 --> 00:00:03,967\n言いますね\n"
    )
    assert csv_to_srt(csv, KEEP_GAPS) == expected


def test_removes_gaps_by_default():
    csv = ",00:00:00:00,00:00:01:00,First subtitle\n,00:00:02:00,00:00:03:00,Second subtitle"
    lines = csv_to_srt(csv).split("\n")
    assert lines[1] == "00:00:00,000 --> 00:00:01,000"
    assert lines[5] == "00:00:01,000 --> 00:00:03,000"


def test_preserves_gaps_when_disabled():
    csv = ",00:00:00:00,00:00:01:00,First subtitle\n,00:00:02:00,00:00:03:00,Second subtitle"
    lines = csv_to_srt(csv, KEEP_GAPS).split("\n")
    assert lines[5] == "00:00:02,000 --> 00:00:03,000"


@pytest.mark.parametrize("csv", ["", "   ", "\n\r\n", None])
def test_empty_input(csv):
    assert csv_to_srt(csv) == ""
    assert convert(csv).ok


def test_skips_empty_lines_and_invalid_rows():
    csv = (
        ",00:00:00:00,00:00:01:00,First\n"
        "\n"
        "invalid line\n"
        ",00:00:02:00,00:00:03:00,Second"
    )
    assert _count(csv_to_srt(csv, KEEP_GAPS)) == 2


def test_skips_headers_with_either_delimiter():
    csv = (
        "Speaker Name,Start Time,End Time,Text\n"
        ",00:00:00:00,00:00:01:00,Subtitle text\n"
        "Start Time\tEnd Time\tText\n"
        "00:00:01:00\t00:00:02:00\tTab row\n"
    )
    srt = csv_to_srt(csv, KEEP_GAPS)
    assert _count(srt) == 2
    assert "Tab row" in srt


def test_mixed_three_and_four_column_rows():
    csv = "Speaker A,00:00:01:00,00:00:03:00,Hello\n00:00:03:00,00:00:05:00,World,extra"
    entries = parse_srt(csv_to_srt(csv, KEEP_GAPS))
    assert [(e.start, e.end, e.text) for e in entries] == [
        ("00:00:01,000", "00:00:03,000", "Hello"),
        ("00:00:03,000", "00:00:05,000", "World"),
    ]
    assert "Speaker A" not in csv_to_srt(csv)


def test_numbering_is_contiguous():
    csv = (
        "Speaker Name,Start Time,End Time,Text\n"
        ",00:00:00:00,00:00:01:00,One\n"
        ",bad,00:00:02:00,Skipped\n"
        ",00:00:02:00,00:00:03:00,   \n"
        ",00:00:03:00,00:00:04:00,Two\n"
        ",00:00:04:00,00:00:05:00,Three\n"
    )
    srt = csv_to_srt(csv, KEEP_GAPS)
    assert re.findall(r"^\d+$", srt, flags=re.MULTILINE) == ["1", "2", "3"]


def test_gap_removal_properties():
    csv = (
        ",00:00:00:10,00:00:01:00,One\n"
        ",00:00:02:00,00:00:03:00,Two\n"
        ",00:00:02:15,00:00:04:00,Three\n"
    )
    kept = parse_srt(csv_to_srt(csv, KEEP_GAPS))
    closed = parse_srt(csv_to_srt(csv))

    assert closed[0].start == kept[0].start == "00:00:00,333"
    for prev, sub in zip(closed, closed[1:]):
        assert sub.start == prev.end
    assert [e.start for e in kept] == ["00:00:00,333", "00:00:02,000", "00:00:02,500"]


def test_quoted_text_with_commas_and_newlines():
    csv = ',"00:00:00:00","00:00:01:00","Hello, world!"\r\n,00:00:01:00,00:00:02:00,"Line one\r\nLine two"\r\n'
    entries = parse_srt(csv_to_srt(csv, KEEP_GAPS))
    assert entries[0].text == "Hello, world!"
    assert entries[1].text == "Line one\nLine two"


def test_trims_text():
    result = csv_to_srt(",00:00:00:00,00:00:01:00,  Text with spaces  ", KEEP_GAPS)
    assert "Text with spaces\n" in result
    assert "  Text with spaces  " not in result


def test_leading_byte_order_mark_is_ignored():
    srt = csv_to_srt("\ufeff00:00:01:00,00:00:02:00,Hi", KEEP_GAPS)
    assert srt == "1\n00:00:01,000 --> 00:00:02,000\nHi\n"


def test_frames_past_frame_rate_are_accepted():
    srt = csv_to_srt("00:00:00:00,00:00:00:45,Late", KEEP_GAPS)
    assert "00:00:00,000 --> 00:00:00,1500" in srt


def test_unexpected_failure_is_returned_as_error(monkeypatch):
    def boom(text):
        raise RuntimeError("boom")

    monkeypatch.setattr("csv_to_srt.convert.parse_rows", boom)

    result = convert("00:00:00:00,00:00:01:00,Hi")
    assert not result.ok
    assert result.error == "boom"
    assert csv_to_srt("00:00:00:00,00:00:01:00,Hi") == "Error generating SRT: boom"


def test_convert_file_default_output(tmp_path):
    src = tmp_path / "captions.csv"
    src.write_text(
        "Speaker Name,Start Time,End Time,Text\n,00:00:00:00,00:00:01:00,Hi\n",
        encoding="utf-8-sig",
    )
    out = convert_file(src)
    assert out == tmp_path / "captions.srt"
    assert out.read_text(encoding="utf-8") == "1\n00:00:00,000 --> 00:00:01,000\nHi\n"


def test_convert_file_explicit_output(tmp_path):
    src = tmp_path / "in.csv"
    src.write_text("00:00:00:00,00:00:01:00,A\n00:00:02:00,00:00:03:00,B\n", encoding="utf-8")
    out = convert_file(src, tmp_path / "custom.srt", KEEP_GAPS)
    assert "00:00:02,000 --> 00:00:03,000" in out.read_text(encoding="utf-8")


def test_convert_file_rejects_invalid_utf8(tmp_path):
    src = tmp_path / "bad.csv"
    src.write_bytes(b"\xff\xfe\xfa,00:00:00:00")
    with pytest.raises(ConversionError):
        convert_file(src)


def test_oversized_frame_count_keeps_other_rows():
    csv = "00:00:00:00,00:00:01:00,ok\n00:00:00:00,00:00:00:" + "9" * 400 + ",big"
    srt = csv_to_srt(csv, KEEP_GAPS)
    assert not srt.startswith("Error generating SRT")
    assert "1\n00:00:00,000 --> 00:00:01,000\nok\n" in srt
    assert "2\n00:00:00,000 --> 00:00:00,Infinity\nbig\n" in srt
