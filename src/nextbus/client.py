"""
NextBus publicJSONFeed client: one operation per feed command.
Each call builds a fresh URL, fetches once and returns the typed result; nothing is cached or shared.
"""
import logging
import time
from collections.abc import Sequence
from typing import cast

from pydantic import BaseModel

from src.nextbus.commands import Command, shape_for
from src.nextbus.fetcher import DEFAULT_TIMEOUT_SECONDS, fetch
from src.nextbus.models import (
    Agency,
    AgencyListResponse,
    Predictions,
    PredictionsResponse,
    Route,
    RouteConfig,
    RouteConfigResponse,
    RouteListResponse,
    Schedule,
    ScheduleResponse,
    VehicleLocations,
)
from src.nextbus.request import NEXTBUS_API_URL, Parameter, build_url, validate_base_url

logger = logging.getLogger(__name__)


class NextBusClient:
    """Client for the NextBus JSON feed. Holds configuration only."""

    def __init__(self, base_url: str = NEXTBUS_API_URL, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        validate_base_url(base_url)
        self._base = base_url
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base

    def execute(self, command: Command | str, params: Sequence[Parameter] = ()) -> BaseModel:
        """Run any command and return its envelope model from the command registry."""
        command = Command(command)
        url = build_url(command.value, params, base_url=self._base)
        logger.info(
            "telemetry nextbus_command command=%s params=%s",
            command.value,
            len(params),
            extra={"command": command.value, "param_count": len(params)},
        )
        return fetch(url, shape_for(command), timeout=self._timeout)

    def get_agency_list(self) -> list[Agency]:
        data = cast(AgencyListResponse, self.execute(Command.AGENCY_LIST))
        return data.agencies

    def get_route_list(self, agency: str) -> list[Route]:
        data = cast(RouteListResponse, self.execute(Command.ROUTE_LIST, [("a", agency)]))
        return data.routes

    def get_route_config(self, agency: str, route: str) -> RouteConfig:
        """Stops, directions and path geometry for one route."""
        data = cast(RouteConfigResponse, self.execute(Command.ROUTE_CONFIG, [("a", agency), ("r", route)]))
        return data.route

    def get_predictions(self, agency: str, route: str, stop: str) -> Predictions:
        params = [("a", agency), ("r", route), ("s", stop)]
        data = cast(PredictionsResponse, self.execute(Command.PREDICTIONS, params))
        return data.predictions

    def get_schedule(self, agency: str, route: str) -> list[Schedule]:
        """One Schedule per direction and service class."""
        data = cast(ScheduleResponse, self.execute(Command.SCHEDULE, [("a", agency), ("r", route)]))
        return data.schedules

    def get_vehicle_locations(self, agency: str, route: str, since: int | None = None) -> VehicleLocations:
        """
        Vehicle positions reported since `since` (epoch seconds, the feed's `t` parameter).
        Defaults to now, which the feed treats as its most recent window.
        """
        t = int(time.time()) if since is None else since
        params = [("a", agency), ("r", route), ("t", str(t))]
        return cast(VehicleLocations, self.execute(Command.VEHICLE_LOCATIONS, params))
