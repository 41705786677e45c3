from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from soastate.app import Provider, build_provider
from soastate.config import ConfigurationError, ProviderConfig
from soastate.domain.model import ResourceType

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_provider_serves_every_resource_type(seeded_engine: Engine) -> None:
    provider = build_provider(engine=seeded_engine)

    assert set(provider.handlers) == set(ResourceType)
    assert [state.identity for state in provider.handler("pa_department").list_all()] == [
        "30",
        "25",
    ]
    assert [state.identity for state in provider.handler("pa_line").list_all()] == ["11", "10"]


def test_unknown_resource_type_is_a_configuration_error(seeded_engine: Engine) -> None:
    provider = Provider(engine=seeded_engine)

    with pytest.raises(ConfigurationError, match="pa_widget"):
        provider.handler("pa_widget")


def test_unit_lifecycle_against_sqlite(seeded_engine: Engine) -> None:
    units = build_provider(engine=seeded_engine).handler("pa_test_unit")

    created = units.create({"pu_id": 3, "description": "Labeler"})
    updated = units.update("3", {"pu_id": 3, "description": "Labeler-2"})
    units.delete("3")

    assert created.identity == "3"
    assert updated is not None
    assert updated.attributes["description"] == "Labeler-2"
    assert units.read("3") is None


def test_department_update_re_reads_row(seeded_engine: Engine) -> None:
    departments = build_provider(engine=seeded_engine).handler("pa_department")

    state = departments.update("30", {"description": "Finance", "time_zone": ""})

    assert state is not None
    assert state.attributes == {
        "dept_id": 30,
        "description": "Finance",
        "extended_info": "second floor",
        "time_zone": "Eastern Standard Time",
        "tag": "fin",
    }


def test_provider_uses_configured_user(seeded_engine: Engine) -> None:
    config = ProviderConfig(server="", username="", password="", user_id=9)

    provider = build_provider(engine=seeded_engine, config=config)

    assert provider.user_id == 9
