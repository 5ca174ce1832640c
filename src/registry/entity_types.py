"""Legal entity types as recorded in the Companies House register.

The bulk data conflates several kinds of legal entity with ordinary UK
companies, and for Community Interest Companies it records the CIC status
*instead of* whether the company is limited by shares or by guarantee.
We map every known ``CompanyCategory`` string to a small set of types so
that the irrelevant ones can be recognised and ignored.
"""

from enum import Enum
from typing import Optional


class EntityType(str, Enum):
    """Closed set of entity types; the value is the output description."""

    LTD = "private limited company"
    CLG = "private company limited by guarantee"
    UNLTD = "private unlimited company"
    CIC = "community interest company"
    REG_SOC = "registered society"
    CIO = "charitable incorporated organisation"
    PLC = "public limited company"
    RECOGNISED = "recognised"

    @property
    def description(self) -> str:
        return self.value


# Exact CompanyCategory strings from the register. Matching is case and
# punctuation sensitive; anything not listed is unrecognised.
COMPANY_CATEGORIES: dict[str, EntityType] = {
    "Private Limited Company": EntityType.LTD,
    "PRI/LTD BY GUAR/NSC (Private, limited by guarantee, no share capital)": EntityType.CLG,
    "PRI/LBG/NSC (Private, Limited by guarantee, no share capital, use of 'Limited' exemption)": EntityType.CLG,
    "Private Unlimited": EntityType.UNLTD,
    "Private Unlimited Company": EntityType.UNLTD,
    "Community Interest Company": EntityType.CIC,
    "Charitable Incorporated Organisation": EntityType.CIO,
    "Scottish Charitable Incorporated Organisation": EntityType.CIO,
    "Registered Society": EntityType.REG_SOC,
    "Public Limited Company": EntityType.PLC,
    # Partnerships and other exotic forms
    "Limited Partnership": EntityType.RECOGNISED,
    "Limited Liability Partnership": EntityType.RECOGNISED,
    "Other company type": EntityType.RECOGNISED,
    "Other Company Type": EntityType.RECOGNISED,
    "Industrial and Provident Society": EntityType.RECOGNISED,
    "Investment Company with Variable Capital": EntityType.RECOGNISED,
    "Investment Company with Variable Capital(Umbrella)": EntityType.RECOGNISED,
    "Investment Company with Variable Capital (Securities)": EntityType.RECOGNISED,
    "Royal Charter Company": EntityType.RECOGNISED,
    "Scottish Partnership": EntityType.RECOGNISED,
    "United Kingdom Economic Interest Grouping": EntityType.RECOGNISED,
    "United Kingdom Societas": EntityType.RECOGNISED,
    "Old Public Company": EntityType.RECOGNISED,
    "PRIV LTD SECT. 30 (Private limited company, section 30 of the Companies Act)": EntityType.RECOGNISED,
    "Protected Cell Company": EntityType.RECOGNISED,
    "Converted/Closed": EntityType.RECOGNISED,
    "Further Education and Sixth Form College Corps": EntityType.RECOGNISED,
    "Overseas Entity": EntityType.RECOGNISED,
}

# Types that can never be an RMC: public companies, CICs, charities,
# registered societies and the partnership/other bucket.
IRRELEVANT_TYPES = frozenset(
    {
        EntityType.PLC,
        EntityType.CIC,
        EntityType.CIO,
        EntityType.REG_SOC,
        EntityType.RECOGNISED,
    }
)


def classify_entity_type(raw_type: str) -> Optional[EntityType]:
    """Map a raw CompanyCategory string to an EntityType.

    Returns None when the string is unrecognised. Callers must report
    this rather than treat it as any particular type.
    """
    return COMPANY_CATEGORIES.get(raw_type)


def is_worth_examining(entity_type: EntityType) -> bool:
    """Whether an entity of this type could plausibly be an RMC."""
    return entity_type not in IRRELEVANT_TYPES
