"""Tests for entity type classification."""

import pytest

from src.registry.entity_types import (
    COMPANY_CATEGORIES,
    EntityType,
    classify_entity_type,
    is_worth_examining,
)


class TestClassifyEntityType:
    """Test the CompanyCategory lookup table."""

    @pytest.mark.parametrize(
        "raw_type, expected",
        [
            ("Private Limited Company", EntityType.LTD),
            (
                "PRI/LTD BY GUAR/NSC (Private, limited by guarantee, no share capital)",
                EntityType.CLG,
            ),
            (
                "PRI/LBG/NSC (Private, Limited by guarantee, no share capital, "
                "use of 'Limited' exemption)",
                EntityType.CLG,
            ),
            ("Private Unlimited", EntityType.UNLTD),
            ("Private Unlimited Company", EntityType.UNLTD),
            ("Community Interest Company", EntityType.CIC),
            ("Charitable Incorporated Organisation", EntityType.CIO),
            ("Scottish Charitable Incorporated Organisation", EntityType.CIO),
            ("Registered Society", EntityType.REG_SOC),
            ("Public Limited Company", EntityType.PLC),
            ("Limited Partnership", EntityType.RECOGNISED),
            ("Limited Liability Partnership", EntityType.RECOGNISED),
            ("Other company type", EntityType.RECOGNISED),
            ("Other Company Type", EntityType.RECOGNISED),
            ("Industrial and Provident Society", EntityType.RECOGNISED),
            ("Investment Company with Variable Capital", EntityType.RECOGNISED),
            ("Investment Company with Variable Capital(Umbrella)", EntityType.RECOGNISED),
            ("Investment Company with Variable Capital (Securities)", EntityType.RECOGNISED),
            ("Royal Charter Company", EntityType.RECOGNISED),
            ("Scottish Partnership", EntityType.RECOGNISED),
            ("United Kingdom Economic Interest Grouping", EntityType.RECOGNISED),
            ("United Kingdom Societas", EntityType.RECOGNISED),
            ("Old Public Company", EntityType.RECOGNISED),
            (
                "PRIV LTD SECT. 30 (Private limited company, section 30 of the Companies Act)",
                EntityType.RECOGNISED,
            ),
            ("Protected Cell Company", EntityType.RECOGNISED),
            ("Converted/Closed", EntityType.RECOGNISED),
            ("Further Education and Sixth Form College Corps", EntityType.RECOGNISED),
            ("Overseas Entity", EntityType.RECOGNISED),
        ],
    )
    def test_known_categories(self, raw_type, expected):
        assert classify_entity_type(raw_type) is expected

    def test_table_size(self):
        """Every known category is covered by the parametrized test above."""
        assert len(COMPANY_CATEGORIES) == 28

    @pytest.mark.parametrize(
        "raw_type",
        [
            "",
            "private limited company",
            "PRIVATE LIMITED COMPANY",
            "Private Limited Company ",
            " Private Limited Company",
            "Private Limited",
            "Limited Liability Company",
        ],
    )
    def test_unrecognised_returns_none(self, raw_type):
        """Matching is exact: case, spacing and wording all matter."""
        assert classify_entity_type(raw_type) is None


class TestEntityTypeDescription:
    """Test the output descriptions."""

    def test_descriptions(self):
        assert EntityType.LTD.description == "private limited company"
        assert EntityType.CLG.description == "private company limited by guarantee"
        assert EntityType.UNLTD.description == "private unlimited company"
        assert EntityType.CIO.description == "charitable incorporated organisation"
        assert EntityType.CIC.description == "community interest company"
        assert EntityType.REG_SOC.description == "registered society"
        assert EntityType.PLC.description == "public limited company"
        assert EntityType.RECOGNISED.description == "recognised"


class TestIsWorthExamining:
    """Test the entity type relevance predicate."""

    @pytest.mark.parametrize("entity_type", [EntityType.LTD, EntityType.CLG, EntityType.UNLTD])
    def test_candidate_types(self, entity_type):
        assert is_worth_examining(entity_type)

    @pytest.mark.parametrize(
        "entity_type",
        [
            EntityType.PLC,
            EntityType.CIC,
            EntityType.CIO,
            EntityType.REG_SOC,
            EntityType.RECOGNISED,
        ],
    )
    def test_irrelevant_types(self, entity_type):
        assert not is_worth_examining(entity_type)
