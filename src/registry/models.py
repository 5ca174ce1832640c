"""Register records as read from the Companies House BasicCompanyData CSV."""

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.registry.entity_types import EntityType

# Header of the BasicCompanyData snapshot, in file order. Several names
# carry a leading space and most contain full stops; they must match the
# source file exactly.
REGISTER_COLUMNS = (
    "CompanyName",
    " CompanyNumber",
    "RegAddress.CareOf",
    "RegAddress.POBox",
    "RegAddress.AddressLine1",
    " RegAddress.AddressLine2",
    "RegAddress.PostTown",
    "RegAddress.County",
    "RegAddress.Country",
    "RegAddress.PostCode",
    "CompanyCategory",
    "CompanyStatus",
    "CountryOfOrigin",
    "DissolutionDate",
    "IncorporationDate",
    "Accounts.AccountRefDay",
    "Accounts.AccountRefMonth",
    "Accounts.NextDueDate",
    "Accounts.LastMadeUpDate",
    "Accounts.AccountCategory",
    "Returns.NextDueDate",
    "Returns.LastMadeUpDate",
    "Mortgages.NumMortCharges",
    "Mortgages.NumMortOutstanding",
    "Mortgages.NumMortPartSatisfied",
    "Mortgages.NumMortSatisfied",
    "SICCode.SicText_1",
    "SICCode.SicText_2",
    "SICCode.SicText_3",
    "SICCode.SicText_4",
    "LimitedPartnerships.NumGenPartners",
    "LimitedPartnerships.NumLimPartners",
    "URI",
    "PreviousName_1.CONDATE",
    " PreviousName_1.CompanyName",
    " PreviousName_2.CONDATE",
    " PreviousName_2.CompanyName",
    "PreviousName_3.CONDATE",
    " PreviousName_3.CompanyName",
    "PreviousName_4.CONDATE",
    " PreviousName_4.CompanyName",
    "PreviousName_5.CONDATE",
    " PreviousName_5.CompanyName",
    "PreviousName_6.CONDATE",
    " PreviousName_6.CompanyName",
    "PreviousName_7.CONDATE",
    " PreviousName_7.CompanyName",
    "PreviousName_8.CONDATE",
    " PreviousName_8.CompanyName",
    "PreviousName_9.CONDATE",
    " PreviousName_9.CompanyName",
    "PreviousName_10.CONDATE",
    " PreviousName_10.CompanyName",
    "ConfStmtNextDueDate",
    " ConfStmtLastMadeUpDate",
)


class MalformedRecordError(ValueError):
    """Input that does not have the shape the filters expect."""


def check_header(fieldnames: Optional[Iterable[str]]) -> None:
    """Raise MalformedRecordError unless every register column is present."""
    present = set(fieldnames or ())
    missing = [column for column in REGISTER_COLUMNS if column not in present]
    if missing:
        raise MalformedRecordError(f"Register header is missing columns: {missing!r}")


class LegalEntityRecord(BaseModel):
    """One row of the register.

    Only the fields used for classification are named; the remaining
    columns are kept untouched in ``model_extra``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    name: str = Field(alias="CompanyName")
    number: str = Field(alias=" CompanyNumber")
    company_type: str = Field(alias="CompanyCategory")
    sic_code1: str = Field(alias="SICCode.SicText_1")
    sic_code2: str = Field(alias="SICCode.SicText_2")
    sic_code3: str = Field(alias="SICCode.SicText_3")
    sic_code4: str = Field(alias="SICCode.SicText_4")

    @classmethod
    def from_row(cls, row: dict) -> "LegalEntityRecord":
        """Build a record from a csv.DictReader row.

        DictReader files surplus cells under the ``None`` key and fills
        missing cells with ``None``; both mean the row is ragged.
        """
        if None in row or any(value is None for value in row.values()):
            raise MalformedRecordError(f"Row has the wrong number of fields: {row!r}")
        try:
            return cls.model_validate(row)
        except ValidationError as e:
            raise MalformedRecordError(f"Invalid register row: {e}") from e

    @property
    def sic_fields(self) -> tuple[str, str, str, str]:
        return (self.sic_code1, self.sic_code2, self.sic_code3, self.sic_code4)


class LegalEntity(BaseModel):
    """A register entry with a recognised type, ready for classification."""

    model_config = ConfigDict(frozen=True)

    name: str
    number: str
    category: EntityType
    sic_codes: tuple[str, ...] = ()

    def to_row(self) -> tuple[str, str, str]:
        """Output projection: number, type description, name."""
        return (self.number, self.category.description, self.name)

    def __str__(self) -> str:
        return f"LegalEntity: {self.number}"
