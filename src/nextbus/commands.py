"""
NextBus feed commands and the static Command -> response shape registry.
Adding a command means one new model in models.py and one entry here.
"""
from enum import Enum

from pydantic import BaseModel

from src.nextbus.models import (
    AgencyListResponse,
    PredictionsResponse,
    RouteConfigResponse,
    RouteListResponse,
    ScheduleResponse,
    VehicleLocations,
)


class Command(str, Enum):
    AGENCY_LIST = "agencyList"
    ROUTE_LIST = "routeList"
    ROUTE_CONFIG = "routeConfig"
    PREDICTIONS = "predictions"
    SCHEDULE = "schedule"
    VEHICLE_LOCATIONS = "vehicleLocations"


COMMAND_SHAPES: dict[Command, type[BaseModel]] = {
    Command.AGENCY_LIST: AgencyListResponse,
    Command.ROUTE_LIST: RouteListResponse,
    Command.ROUTE_CONFIG: RouteConfigResponse,
    Command.PREDICTIONS: PredictionsResponse,
    Command.SCHEDULE: ScheduleResponse,
    Command.VEHICLE_LOCATIONS: VehicleLocations,
}


def shape_for(command: Command | str) -> type[BaseModel]:
    """Return the envelope model for a command. Unknown names raise ValueError."""
    return COMMAND_SHAPES[Command(command)]
