"""Persons with significant control (PSC) disclosures.

The PSC snapshot is one JSON object per line, each carrying the company
number and a ``data`` object whose ``kind`` says what sort of disclosure
it is. Anything outside the vocabulary below means the snapshot format
has changed, and is fatal.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

TOTALS_KIND = "totals#persons-of-significant-control-snapshot"
STATEMENT_KIND = "persons-with-significant-control-statement"
EXEMPTIONS_KIND = "exemptions"

# Prefixes of entities that cannot be RMCs, e.g. LLPs and societies
EXCLUDED_PREFIXES = frozenset({"SO", "OC", "SL", "NC", "SE", "SG", "OE"})
# Companies registered outside England & Wales
ACCEPTED_PREFIXES = frozenset({"NI", "SC", "R0", "ZC", "SZ"})


class ControllerType(str, Enum):
    INDIVIDUAL = "individual"
    CORPORATE = "corporate"
    UNIDENTIFIED = "unidentified"


KIND_CONTROLLERS = {
    "super-secure-person-with-significant-control": ControllerType.UNIDENTIFIED,
    "individual-person-with-significant-control": ControllerType.INDIVIDUAL,
    "legal-person-person-with-significant-control": ControllerType.CORPORATE,
    "corporate-entity-person-with-significant-control": ControllerType.CORPORATE,
}

# Misspelt in the register itself
NO_CONTROLLER_STATEMENTS = frozenset({"no-individual-or-entity-with-signficant-control"})
UNIDENTIFIED_STATEMENTS = frozenset(
    {
        "psc-details-not-confirmed",
        "psc-exists-but-not-identified",
        "psc-contacted-but-no-response",
        "restrictions-notice-issued-to-psc",
        "psc-has-failed-to-confirm-changed-details",
    }
)
# Unknown rather than "no controller", though both are skipped
STEPS_NOT_COMPLETED_STATEMENT = "steps-to-find-psc-not-yet-completed"

CEASED_KEYS = ("ceased_on", "ceased")


class SchemaViolationError(Exception):
    """The snapshot contains a value outside the known vocabulary."""


class PSCData(BaseModel):
    """The ``data`` object of a PSC snapshot line."""

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: str
    statement: Optional[str] = None

    @property
    def has_ceased(self) -> bool:
        """True if a ceased key is present at all, whatever its value."""
        extra = self.model_extra or {}
        return any(key in extra for key in CEASED_KEYS)


class PSCRecord(BaseModel):
    """One line of the PSC snapshot."""

    model_config = ConfigDict(extra="allow", frozen=True)

    # Anything other than a string is treated as missing
    company_number: Optional[Any] = None
    data: PSCData


class PSCClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_number: str
    controller: ControllerType

    def to_row(self, emit_controller: bool = False) -> tuple[str, ...]:
        if emit_controller:
            return (self.company_number, self.controller.value)
        return (self.company_number,)


def check_company_number_prefix(number: str) -> bool:
    """Decide from its first two characters whether a company is in scope.

    Numeric prefixes are England & Wales companies. Returns False for
    entities that cannot be RMCs and raises SchemaViolationError for a
    prefix we have never seen.
    """
    prefix = number[:2]
    if len(prefix) == 2 and prefix.isascii() and prefix.isdigit():
        return True
    if prefix in EXCLUDED_PREFIXES:
        return False
    if prefix in ACCEPTED_PREFIXES:
        return True
    raise SchemaViolationError(f"Unrecognised company number prefix: {number!r}")


def _classify_statement(record: PSCRecord) -> Optional[ControllerType]:
    statement = record.data.statement
    if statement in NO_CONTROLLER_STATEMENTS:
        return None
    if statement in UNIDENTIFIED_STATEMENTS:
        return ControllerType.UNIDENTIFIED
    if statement == STEPS_NOT_COMPLETED_STATEMENT:
        return None
    raise SchemaViolationError(
        f"Unrecognised PSC statement {statement!r} for company {record.company_number}"
    )


def classify_psc(record: PSCRecord) -> Optional[PSCClassification]:
    """Classify one PSC disclosure.

    Returns None for lines to skip: snapshot totals, records without a
    company number, out-of-scope prefixes, ceased disclosures, exemptions
    and statements saying there is no (known) controller.
    """
    kind = record.data.kind
    if kind == TOTALS_KIND:
        return None

    number = record.company_number
    if not isinstance(number, str):
        logger.warning("No company number: %s", record.model_dump_json())
        return None

    if not check_company_number_prefix(number):
        return None

    if record.data.has_ceased:
        return None

    if kind in KIND_CONTROLLERS:
        controller = KIND_CONTROLLERS[kind]
    elif kind == STATEMENT_KIND:
        controller = _classify_statement(record)
        if controller is None:
            return None
    elif kind == EXEMPTIONS_KIND:
        return None
    else:
        raise SchemaViolationError(f"Unrecognised PSC kind {kind!r} for company {number}")

    return PSCClassification(company_number=number, controller=controller)
