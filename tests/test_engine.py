from pathlib import Path

import pytest

from romsconf.core.errors import (
    DuplicateKeyError,
    MissingKeyError,
    UnreadableTemplateError,
    UnwritableOutputError,
)
from romsconf.core.models import (
    ContinuationStyle,
    ParameterSheet,
    RenderConfig,
    RenderTask,
)
from romsconf.rendering.engine import (
    render,
    render_all,
    render_text,
    render_to_file,
)


def sheet(**values) -> ParameterSheet:
    return ParameterSheet.from_mapping(values)


def changed_lines(before: str, after: str) -> list[tuple[str, str]]:
    return [(a, b) for a, b in zip(before.splitlines(), after.splitlines()) if a != b]


def test_float_value_replaces_fortran_literal():
    assert render_text("DT == 1.0d0\n", sheet(DT=300.0)) == "DT == 300.0\n"


def test_only_target_line_changes(template_text):
    rendered = render_text(template_text, sheet(DT=300.0))

    assert changed_lines(template_text, rendered) == [
        ("       DT == 1.0d0", "       DT == 300.0")
    ]


def test_line_count_preserved_for_single_line_values(template_text):
    rendered = render_text(
        template_text,
        sheet(DT=300.0, NTIMES=8640, Lm=120, TITLE="Run 2", GRDNAME="bg_grd.nc"),
    )

    assert len(rendered.splitlines()) == len(template_text.splitlines())


def test_render_is_idempotent(template_path):
    values = sheet(DT=300.0, FRCNAME=["a.nc", "b.nc"])

    assert render(template_path, values) == render(template_path, values)


def test_trailing_comment_and_spacing_preserved(template_text):
    rendered = render_text(template_text, sheet(Lm=120))

    assert "   Lm == 120       ! Number of I-direction INTERIOR RHO-points\n" in rendered


def test_single_equals_assignment(template_text):
    rendered = render_text(template_text, sheet(TITLE="Run 2"))

    assert "       TITLE = Run 2\n" in rendered


def test_key_with_parentheses(template_text):
    rendered = render_text(
        template_text, sheet(**{"LBC(isFsur)": "Rad     Rad     Clo     Clo"})
    )

    assert "  LBC(isFsur) ==   Rad     Rad     Clo     Clo\n" in rendered


def test_key_does_not_match_longer_names(template_text):
    rendered = render_text(template_text, sheet(DT=300.0))

    assert "  NDTFAST == 30\n" in rendered
    assert "! DT == 5.0d0\n" in rendered


def test_boolean_renders_as_fortran_logical():
    assert render_text("LcycleRST == F\n", sheet(LcycleRST=True)) == "LcycleRST == T\n"


def test_file_list_aligned_under_value(template_text):
    rendered = render_text(template_text, sheet(FRCNAME=["a.nc", "b.nc", "c.nc"]))

    indent = " " * len("  FRCNAME == ")
    expected = f"  FRCNAME == a.nc \\\n{indent}b.nc \\\n{indent}c.nc\n"
    assert expected in rendered
    assert "roms_bulk.nc" not in rendered
    assert rendered.endswith(expected + "! DT == 5.0d0\n")


def test_file_list_uses_caller_join_format(template_text):
    style = ContinuationStyle(marker=" \\", indent="    ")
    rendered = render_text(template_text, sheet(FRCNAME=["a.nc", "b.nc"]), style)

    assert "  FRCNAME == a.nc \\\n    b.nc\n" in rendered


def test_continued_value_replaced_by_single_value(template_text):
    rendered = render_text(template_text, sheet(FRCNAME="one.nc"))

    assert "  FRCNAME == one.nc\n! DT == 5.0d0\n" in rendered
    assert len(rendered.splitlines()) == len(template_text.splitlines()) - 1


def test_crlf_line_endings_preserved():
    text = "FRCNAME == x.nc\r\nDT == 1.0d0\r\n"

    rendered = render_text(text, sheet(DT=2.5, FRCNAME=["a.nc", "b.nc"]))

    indent = " " * len("FRCNAME == ")
    assert rendered == f"FRCNAME == a.nc \\\r\n{indent}b.nc\r\nDT == 2.5\r\n"


def test_missing_final_newline_preserved():
    assert render_text("DT == 1.0d0", sheet(DT=2.5)) == "DT == 2.5"


def test_empty_sheet_copies_template(template_text):
    assert render_text(template_text, ParameterSheet()) == template_text


def test_missing_key_raises(template_text):
    with pytest.raises(MissingKeyError) as excinfo:
        render_text(template_text, sheet(DT=300.0, XYZ=1, ABC=2))

    assert excinfo.value.keys == ("XYZ", "ABC")


def test_duplicate_key_raises():
    with pytest.raises(DuplicateKeyError) as excinfo:
        render_text("A == 1\nA == 2\n", sheet(A=3))

    assert excinfo.value.keys == ("A",)


def test_unreadable_template(tmp_path):
    with pytest.raises(UnreadableTemplateError):
        render(tmp_path / "missing.in", sheet(DT=1.0))


def test_render_to_file_writes_output(template_path, tmp_path):
    output = tmp_path / "run" / "ocean.in"

    result = render_to_file(template_path, sheet(DT=300.0), output, file_mode=0o600)

    assert result == output
    assert "       DT == 300.0\n" in output.read_text(encoding="utf-8")
    assert output.stat().st_mode & 0o777 == 0o600


def test_render_to_file_overwrites(template_path, tmp_path):
    output = tmp_path / "ocean.in"
    output.write_text("stale", encoding="utf-8")

    render_to_file(template_path, sheet(DT=300.0), output)

    assert output.read_text(encoding="utf-8").startswith("! Application title")


def test_failed_render_leaves_existing_output(template_path, tmp_path):
    output = tmp_path / "ocean.in"
    output.write_text("previous", encoding="utf-8")

    with pytest.raises(MissingKeyError):
        render_to_file(template_path, sheet(XYZ=1), output)

    assert output.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["ocean.in", "ocean.in.tmpl"]


def test_unwritable_output(template_path, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(UnwritableOutputError):
        render_to_file(template_path, sheet(DT=1.0), blocker / "ocean.in")


def test_render_all_resolves_relative_outputs(template_path, tmp_path):
    config = RenderConfig(
        tasks=[
            RenderTask(
                template_path=template_path,
                output_path=Path("a.in"),
                sheet=sheet(DT=100.0),
            ),
            RenderTask(
                template_path=template_path,
                output_path=Path("b.in"),
                sheet=sheet(DT=200.0),
            ),
        ],
        dest_root=tmp_path / "out",
    )

    outputs = render_all(config)

    assert outputs == [tmp_path / "out" / "a.in", tmp_path / "out" / "b.in"]
    assert "DT == 200.0" in outputs[1].read_text(encoding="utf-8")
