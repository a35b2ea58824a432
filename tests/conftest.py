from __future__ import annotations

from pathlib import Path

import pytest

OCEAN_TEMPLATE = """\
! Application title
       TITLE = Benguela upwelling test

   Lm == 100       ! Number of I-direction INTERIOR RHO-points
   Mm == 80
    N == 32

   NTIMES == 1000
       DT == 1.0d0
  NDTFAST == 30

  LBC(isFsur) ==   Clo     Clo     Clo     Clo

  GRDNAME == roms_grd.nc
  FRCNAME == roms_frc.nc \\
             roms_bulk.nc
! DT == 5.0d0
"""


@pytest.fixture
def template_text() -> str:
    return OCEAN_TEMPLATE


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    path = tmp_path / "ocean.in.tmpl"
    path.write_text(OCEAN_TEMPLATE, encoding="utf-8")
    return path
