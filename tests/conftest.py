"""Pytest configuration and fixtures.

Provides factory fixtures for building register rows and CSV snapshots with the
exact header of the Companies House BasicCompanyData file.
"""

import csv
import io

import pytest

from src.registry.models import REGISTER_COLUMNS


def _make_register_row(**overrides) -> dict:
    """Build a register row keyed by raw header names.

    Keyword arguments use the friendly names name, number, company_type
    and sic1..sic4; anything else must be a raw header name passed via
    the ``raw`` dict.
    """
    row = {column: "" for column in REGISTER_COLUMNS}
    friendly = {
        "name": "CompanyName",
        "number": " CompanyNumber",
        "company_type": "CompanyCategory",
        "sic1": "SICCode.SicText_1",
        "sic2": "SICCode.SicText_2",
        "sic3": "SICCode.SicText_3",
        "sic4": "SICCode.SicText_4",
    }
    raw = overrides.pop("raw", {})
    for key, value in overrides.items():
        row[friendly[key]] = value
    row.update(raw)
    return row


def _make_register_csv(rows: list[dict], header=REGISTER_COLUMNS) -> str:
    """Serialise register rows to CSV text, header first."""
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=list(header), extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return output.getvalue()


@pytest.fixture
def rmc_row():
    """A register row that passes every RMC check."""
    return _make_register_row(
        name="RIVERSIDE HOUSE MANAGEMENT COMPANY LIMITED",
        number="01234567",
        company_type="Private Limited Company",
        sic1="68320 - Management of real estate on a fee or contract basis",
        raw={"RegAddress.PostTown": "LONDON", "CompanyStatus": "Active"},
    )


@pytest.fixture
def excluded_names():
    return ("INVESTMENTS", " HOLDINGS", "ASSET MANAGEMENT")


@pytest.fixture
def included_names():
    return ("RESIDENTS", "RTM COMPANY", "FREEHOLD")


@pytest.fixture
def register_row():
    """Factory for register rows; see _make_register_row."""
    return _make_register_row


@pytest.fixture
def register_csv():
    """Factory for register CSV text; see _make_register_csv."""
    return _make_register_csv
