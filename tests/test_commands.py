"""Tests for the Command -> response shape registry."""
import pytest

from src.nextbus.commands import COMMAND_SHAPES, Command, shape_for
from src.nextbus.models import (
    AgencyListResponse,
    PredictionsResponse,
    RouteConfigResponse,
    RouteListResponse,
    ScheduleResponse,
    VehicleLocations,
)


def test_every_command_has_exactly_one_shape():
    assert set(COMMAND_SHAPES) == set(Command)
    assert len(set(COMMAND_SHAPES.values())) == len(Command)


@pytest.mark.parametrize(
    "name,shape",
    [
        ("agencyList", AgencyListResponse),
        ("routeList", RouteListResponse),
        ("routeConfig", RouteConfigResponse),
        ("predictions", PredictionsResponse),
        ("schedule", ScheduleResponse),
        ("vehicleLocations", VehicleLocations),
    ],
)
def test_shape_for_wire_name(name, shape):
    assert shape_for(name) is shape
    assert Command(name).value == name


def test_shape_for_unknown_command():
    with pytest.raises(ValueError):
        shape_for("messages")
