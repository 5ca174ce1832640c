"""SIC code extraction from the register's annotated SIC columns."""

from typing import Iterable

from src.registry.models import LegalEntityRecord

# Separator between a code and its textual annotation, e.g.
# "68320 - Management of real estate on a fee or contract basis".
SIC_SEPARATOR = " - "

# 68320: management of real estate on a fee or contract basis
# 98000: residents property management
RELEVANT_SIC_CODES = frozenset({"68320", "98000"})


def extract_sics(record: LegalEntityRecord) -> tuple[str, ...]:
    """Return the codes from the four SIC columns, annotations removed.

    A column without the separator is empty or malformed and is skipped.
    Column order is kept and duplicates are not removed.
    """
    sics = []
    for sic in record.sic_fields:
        if SIC_SEPARATOR not in sic:
            continue
        sics.append(sic.split(" ", 1)[0])
    return tuple(sics)


def has_relevant_sic(codes: Iterable[str]) -> bool:
    """True if any code is one RMCs are normally registered under."""
    return any(code in RELEVANT_SIC_CODES for code in codes)
