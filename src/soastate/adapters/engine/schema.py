"""Pydantic models for the attribute maps exchanged with the declarative engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from soastate.domain.model import DepartmentAttributes, LineAttributes, UnitAttributes
from soastate.domain.nullable import NO_ID


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


def _none_to_sentinel(value: object) -> object:
    return NO_ID if value is None else value


class EngineBaseModel(BaseModel):
    # prior state comes back with computed fields (ids, joined names) included
    model_config = ConfigDict(extra="ignore", frozen=True)


class DepartmentSchema(EngineBaseModel):
    description: str
    extended_info: str = ""
    time_zone: str = ""
    tag: str = ""

    _normalize_optional = field_validator("extended_info", "time_zone", "tag", mode="before")(
        _none_to_blank
    )

    def to_attributes(self) -> DepartmentAttributes:
        return DepartmentAttributes(
            description=self.description,
            extended_info=self.extended_info,
            time_zone=self.time_zone,
            tag=self.tag,
        )


class LineSchema(EngineBaseModel):
    description: str
    department_id: int
    extended_info: str = ""
    external_link: str = ""
    security_group_id: int = NO_ID

    _normalize_optional = field_validator("extended_info", "external_link", mode="before")(
        _none_to_blank
    )
    _normalize_group = field_validator("security_group_id", mode="before")(_none_to_sentinel)

    def to_attributes(self) -> LineAttributes:
        return LineAttributes(
            description=self.description,
            department_id=self.department_id,
            extended_info=self.extended_info,
            external_link=self.external_link,
            security_group_id=self.security_group_id,
        )


class UnitSchema(EngineBaseModel):
    pu_id: int
    description: str

    def to_attributes(self) -> UnitAttributes:
        return UnitAttributes(unit_id=self.pu_id, description=self.description)
