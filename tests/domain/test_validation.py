from __future__ import annotations

import pytest

from soastate.domain.errors import ValidationError
from soastate.domain.model import DepartmentAttributes, LineAttributes, UnitAttributes
from soastate.domain.validation import (
    department_violations,
    line_violations,
    require_valid,
    unit_violations,
    validate_time_zone,
    validate_title,
    validate_varchar255,
)


@pytest.mark.parametrize(
    "value",
    ["Finance Ops", "Line-1", "pack_line (north)", "A", "x" * 50],
)
def test_title_accepts_words_separated_by_single_spaces(value: str) -> None:
    assert validate_title(value, "description") == []


@pytest.mark.parametrize(
    "value",
    ["", " leading", "trailing ", "double  space", "semi;colon", "dot.ted", "Café"],
)
def test_title_rejects_forbidden_shapes(value: str) -> None:
    violations = validate_title(value, "description")

    assert len(violations) == 1
    assert "can only contain" in violations[0]


def test_title_reports_length_and_pattern_separately() -> None:
    violations = validate_title("y" * 51 + "!", "description")

    assert len(violations) == 2
    assert "50 characters or fewer" in violations[0]


def test_varchar255() -> None:
    assert validate_varchar255("", "extended_info") == []
    assert validate_varchar255("z" * 255, "extended_info") == []
    assert validate_varchar255("z" * 256, "extended_info") == [
        "'extended_info' must be less than or equal to 255 characters, or empty"
    ]


@pytest.mark.parametrize("value", ["Eastern Standard Time", "Pacific Standard Time", "UTC"])
def test_time_zone_allow_list(value: str) -> None:
    assert validate_time_zone(value, "time_zone") == []


@pytest.mark.parametrize("value", ["utc", "GMT", "Central Standard Time", ""])
def test_time_zone_rejects_everything_else(value: str) -> None:
    assert validate_time_zone(value, "time_zone") != []


def test_department_time_zone_is_optional() -> None:
    assert department_violations(DepartmentAttributes(description="Finance Ops")) == []
    assert department_violations(
        DepartmentAttributes(description="Finance Ops", time_zone="Mars")
    ) != []


def test_line_rules_collect_every_violation() -> None:
    attributes = LineAttributes(
        description="bad;name",
        department_id=-5,
        extended_info="e" * 300,
        external_link="l" * 300,
    )

    assert len(line_violations(attributes)) == 4


def test_unit_rules() -> None:
    assert unit_violations(UnitAttributes(unit_id=3, description="Filler")) == []
    assert unit_violations(UnitAttributes(unit_id=-1, description="Filler")) != []


def test_require_valid_raises_with_all_messages() -> None:
    with pytest.raises(ValidationError) as excinfo:
        require_valid(["first", "second"])

    assert excinfo.value.violations == ("first", "second")
    require_valid([])
