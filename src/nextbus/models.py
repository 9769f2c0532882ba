"""Pydantic models for NextBus publicJSONFeed responses."""
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _wrap_single(value: Any) -> Any:
    # The feed collapses one-element arrays into a bare object.
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return value


FeedList = Annotated[list[T], BeforeValidator(_wrap_single)]


class FeedModel(BaseModel):
    """Base for every feed record: camelCase wire names, all fields optional, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )


# --- agencyList / routeList ---


class Agency(FeedModel):
    title: str = ""
    tag: str = ""
    region_title: str = ""
    short_title: str = ""


class Route(FeedModel):
    tag: str = ""
    title: str = ""


# --- routeConfig ---


class Stop(FeedModel):
    title: str = ""
    stop_id: str = ""
    tag: str = ""
    lat: str = ""
    lon: str = ""


class StopRef(FeedModel):
    tag: str = ""


class Direction(FeedModel):
    title: str = ""
    tag: str = ""
    name: str = ""
    branch: str = ""
    stops: FeedList[StopRef] = Field(default_factory=list, alias="stop")


class Point(FeedModel):
    lat: str = ""
    lon: str = ""


class Path(FeedModel):
    points: FeedList[Point] = Field(default_factory=list, alias="point")


class RouteConfig(FeedModel):
    title: str = ""
    tag: str = ""
    color: str = ""
    opposite_color: str = ""
    lat_min: str = ""
    lat_max: str = ""
    lon_min: str = ""
    lon_max: str = ""
    stops: FeedList[Stop] = Field(default_factory=list, alias="stop")
    directions: FeedList[Direction] = Field(default_factory=list, alias="direction")
    paths: FeedList[Path] = Field(default_factory=list, alias="path")


# --- predictions ---


class Prediction(FeedModel):
    is_departure: str = ""
    minutes: str = ""
    seconds: str = ""
    trip_tag: str = ""
    vehicle: str = ""
    block: str = ""
    branch: str = ""
    dir_tag: str = ""
    epoch_time: str = ""


class PredictionDirection(FeedModel):
    title: str = ""
    predictions: FeedList[Prediction] = Field(default_factory=list, alias="prediction")


class Predictions(FeedModel):
    agency_title: str = ""
    route_tag: str = ""
    route_title: str = ""
    stop_title: str = ""
    stop_tag: str = ""
    # Set by the feed instead of `direction` when nothing is predicted.
    dir_title_because_no_predictions: str = ""
    direction: PredictionDirection = Field(default_factory=PredictionDirection)


# --- schedule ---


class ScheduleStop(FeedModel):
    content: str = ""
    tag: str = ""
    epoch_time: str = ""


class ScheduleHeader(FeedModel):
    stops: FeedList[ScheduleStop] = Field(default_factory=list, alias="stop")


class ScheduleRow(FeedModel):
    block_id: str = Field(default="", alias="blockID")
    stops: FeedList[ScheduleStop] = Field(default_factory=list, alias="stop")


class Schedule(FeedModel):
    title: str = ""
    tag: str = ""
    direction: str = ""
    service_class: str = ""
    schedule_class: str = ""
    header: ScheduleHeader = Field(default_factory=ScheduleHeader)
    rows: FeedList[ScheduleRow] = Field(default_factory=list, alias="tr")


# --- vehicleLocations ---


class Vehicle(FeedModel):
    id: str = ""
    route_tag: str = ""
    dir_tag: str = ""
    predictable: str = ""
    lat: str = ""
    lon: str = ""
    heading: str = ""
    speed_km_hr: str = ""
    secs_since_report: str = ""


class LastTime(FeedModel):
    time: str = ""


# --- per-command envelopes (top-level JSON object) ---


class AgencyListResponse(FeedModel):
    agencies: FeedList[Agency] = Field(default_factory=list, alias="agency")


class RouteListResponse(FeedModel):
    routes: FeedList[Route] = Field(default_factory=list, alias="route")


class RouteConfigResponse(FeedModel):
    route: RouteConfig = Field(default_factory=RouteConfig)


class PredictionsResponse(FeedModel):
    predictions: Predictions = Field(default_factory=Predictions)


class ScheduleResponse(FeedModel):
    schedules: FeedList[Schedule] = Field(default_factory=list, alias="route")


class VehicleLocations(FeedModel):
    """vehicleLocations has no wrapper key: the top-level object is the result."""

    last_time: LastTime = Field(default_factory=LastTime)
    vehicles: FeedList[Vehicle] = Field(default_factory=list, alias="vehicle")
