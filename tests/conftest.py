"""Shared fixtures: small GWP datasets written to tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

HEADER = (
    "country,variableId,variableName,lineOfBusiness,"
    + ",".join(f"Y{year}" for year in range(2000, 2016))
)

AE_TRANSPORT = (
    "ae,gwp,Direct Premiums,transport,,,,,,,,231441262.7,268744928.7,284448918.2,"
    "314413884.1,327740154.4,326126300.6,240322742.6,234164748.7,"
)
AE_PROPERTY = (
    "ae,gwp,Direct Premiums,property,,,,,,,,422555207.6,446001906.1,581850238.3,"
    "617352212.4,684477603.8,658736555.5,593685815.4,611083582.9,"
)

TRANSPORT_MEAN = 278425367.5
PROPERTY_MEAN = 576967890.25


def row(country: str, lob: str, values) -> str:
    cells = ["" if v is None else str(v) for v in values]
    assert len(cells) == 16
    return ",".join([country, "gwp", "Direct Premiums", lob] + cells)


@pytest.fixture
def write_csv(tmp_path: Path):
    def _write(*lines: str, header: str = HEADER) -> Path:
        path = tmp_path / "gwp.csv"
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ae_csv(write_csv) -> Path:
    return write_csv(AE_TRANSPORT, AE_PROPERTY)
