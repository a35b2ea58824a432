from romsconf.rendering.grammar import index_assignments, scan_assignments, split_lines


def test_split_lines_keeps_terminators():
    lines = split_lines("a == 1\r\nb == 2\nc == 3")

    assert [line.content for line in lines] == ["a == 1", "b == 2", "c == 3"]
    assert [line.ending for line in lines] == ["\r\n", "\n", ""]


def test_scan_finds_assignments_in_order(template_text):
    keys = [a.key for a in scan_assignments(split_lines(template_text))]

    assert keys == [
        "TITLE",
        "Lm",
        "Mm",
        "N",
        "NTIMES",
        "DT",
        "NDTFAST",
        "LBC(isFsur)",
        "GRDNAME",
        "FRCNAME",
    ]


def test_comment_lines_are_not_assignments():
    assert scan_assignments(split_lines("! DT == 5.0d0\n  !Lm == 3\n")) == []


def test_trailing_comment_is_split_from_value(template_text):
    lm = next(a for a in scan_assignments(split_lines(template_text)) if a.key == "Lm")

    assert lm.value == "100"
    assert lm.tail == "       ! Number of I-direction INTERIOR RHO-points"
    assert lm.prefix == "   Lm == "


def test_single_equals_operator(template_text):
    title = scan_assignments(split_lines(template_text))[0]

    assert title.op == "="
    assert title.value == "Benguela upwelling test"


def test_continued_value_spans_lines(template_text):
    lines = split_lines(template_text)
    frc = next(a for a in scan_assignments(lines) if a.key == "FRCNAME")

    assert frc.line_count == 2
    assert lines[frc.start].content.startswith("  FRCNAME")
    assert frc.value == "roms_frc.nc \\\n             roms_bulk.nc"


def test_continuation_at_end_of_file_stops():
    (only,) = scan_assignments(split_lines("FRCNAME == a.nc \\\n"))

    assert only.line_count == 1


def test_value_indent_keeps_tabs():
    (only,) = scan_assignments(split_lines("\tKEY == x\n"))

    assert only.value_indent == "\t" + " " * len("KEY == ")


def test_index_assignments_reports_absent_keys(template_text):
    found = index_assignments(scan_assignments(split_lines(template_text)), ["DT", "XYZ"])

    assert len(found["DT"]) == 1
    assert found["XYZ"] == []
