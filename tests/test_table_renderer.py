"""
Tests for TableRenderer: column sizing, cell texts and overall layout.
"""
import io
import pytest
from dircompare.core.models import (
    ComparisonReport, Directory, EquivalenceClass, Fingerprint, FingerprintMode,
    Occurrence, ReportMode)
from dircompare.services.table_renderer import TableRenderer, ABSENT_MARKER


D1 = Directory(0, "/tmp/first")
D2 = Directory(1, "/tmp/second")


def make_class(content, *occurrences, algorithm="exact"):
    return EquivalenceClass(
        fingerprint=Fingerprint(algorithm, content),
        occurrences=tuple(Occurrence(d, n) for d, n in occurrences),
    )


def make_report(*classes, mode=FingerprintMode.EXACT, directories=(D1, D2)):
    return ComparisonReport(
        directories=directories,
        classes=classes,
        selected=classes,
        mode=ReportMode.ALL,
        fingerprint_mode=mode,
    )


class TestFixedLength:

    @pytest.mark.parametrize("text, width, expected", [
        ("abc", 5, "abc  "),
        ("abcdef", 3, "abc"),
        ("abc", 3, "abc"),
        ("", 2, "  "),
    ])
    def test_pads_and_truncates(self, text, width, expected):
        assert TableRenderer.fixed_length(text, width) == expected

    def test_combining_marks_stay_with_base(self):
        decomposed = "e\u0301te"  # "ete" with a combining acute accent on the first e
        assert TableRenderer.fixed_length(decomposed, 1) == "e\u0301"
        assert TableRenderer.fixed_length(decomposed, 4) == decomposed + " "

    def test_flag_is_one_character(self):
        flag = "\U0001F1E9\U0001F1EA"  # regional indicators D + E
        assert TableRenderer.fixed_length(flag + "x", 1) == flag
        assert TableRenderer.fixed_length(flag, 3) == flag + "  "

    def test_zwj_sequence_is_one_character(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert TableRenderer.fixed_length(family + "x", 1) == family
        assert TableRenderer.fixed_length(family + "x", 2) == family + "x"

    def test_decomposed_hangul_syllable_not_split(self):
        han = "\u1112\u1161\u11ab"  # leading, vowel and trailing jamo of one syllable
        assert TableRenderer.fixed_length(han, 2) == han + " "
        assert TableRenderer.fixed_length(han + han, 1) == han

    def test_custom_padding(self):
        assert TableRenderer.fixed_length("a", 3, ".") == "a.."


class TestCellText:

    def test_absent_single_and_multiple(self):
        cls = make_class(b"A", (D1, "a.txt"), (D1, "b.txt"), (D2, "c.txt"))
        assert TableRenderer.cell_text(cls, D1) == "(2 files)"
        assert TableRenderer.cell_text(cls, D2) == "c.txt"

        only_first = make_class(b"B", (D1, "a.txt"))
        assert TableRenderer.cell_text(only_first, D2) == ABSENT_MARKER


class TestRender:

    def test_layout(self):
        cls = make_class(b"A", (D1, "x.txt"), (D2, "x.txt"))
        output = TableRenderer(column_width=8).render(make_report(cls))
        lines = output.split("\n")

        assert lines[0] == ""
        assert lines[1] == "#\tSHA256" + " " * 58 + "\tfirst   \tsecond  "
        assert lines[2] == f"1\t{cls.fingerprint.hexdigest}\tx.txt   \tx.txt   "
        assert lines[3] == ""
        assert output.endswith("\n\n")

    def test_rows_numbered_from_one(self):
        classes = [make_class(bytes([i]), (D1, f"{i}.txt")) for i in range(3)]
        lines = TableRenderer(4).render(make_report(*classes)).strip("\n").split("\n")

        assert [line.split("\t")[0] for line in lines[1:]] == ["1", "2", "3"]
        assert all(line.endswith(ABSENT_MARKER + "   ") for line in lines[1:])

    def test_long_names_truncated(self):
        cls = make_class(b"A", (D1, "a_very_long_file_name.txt"))
        row = TableRenderer(6).render(make_report(cls)).split("\n")[2]
        assert row.split("\t")[2] == "a_very"

    def test_xxhash_header_width(self):
        cls = make_class(b"\x01" * 16, (D1, "x"), algorithm="xxhash")
        header = TableRenderer(4).render(make_report(cls, mode=FingerprintMode.XXHASH)).split("\n")[1]
        assert header.split("\t")[1] == "XXH128" + " " * 26

    def test_unnamed_directory_label(self):
        report = make_report(directories=(Directory(0, "/"), D2))
        header = TableRenderer(5).render(report).split("\n")[1]
        assert header.split("\t")[2] == "???  "

    def test_empty_report_has_header_only(self):
        output = TableRenderer().render(make_report())
        assert output.count("\n") == 3

    def test_write_to_stream(self):
        stream = io.StringIO()
        TableRenderer().write(make_report(), stream)
        assert stream.getvalue().startswith("\n#\t")

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            TableRenderer(0)
