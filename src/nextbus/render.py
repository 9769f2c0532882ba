"""Plain-text rendering of NextBus results for the CLI."""
from collections.abc import Callable
from typing import Any

from src.nextbus.models import (
    Agency,
    Direction,
    Prediction,
    Predictions,
    Route,
    RouteConfig,
    Schedule,
    Stop,
    Vehicle,
    VehicleLocations,
)

INDENT = "\t "


def render_agency(a: Agency) -> str:
    return f"{INDENT}Agency: {a.title} - Tag: {a.tag}\n{INDENT}Region: {a.region_title} Short: {a.short_title}"


def render_route(r: Route) -> str:
    return f"{INDENT}Title: {r.title} - Tag: {r.tag}"


def render_stop(s: Stop) -> str:
    return f"{INDENT}Title: {s.title} - Tag: {s.tag}"


def render_direction(d: Direction) -> str:
    return f"{INDENT}Title: {d.title} - Tag: {d.tag}"


def render_route_config(r: RouteConfig) -> str:
    lines = [f"{INDENT}Title: {r.title}", f"{INDENT}Tag: {r.tag}", f"{INDENT}Stops:"]
    lines.extend(render_stop(s) for s in r.stops)
    lines.append(f"{INDENT}Directions:")
    lines.extend(render_direction(d) for d in r.directions)
    return "\n".join(lines)


def render_prediction(p: Prediction) -> str:
    return (
        f"{INDENT}Vehicle: {p.vehicle} - Block: {p.block} - Branch: {p.branch} - Direction: {p.dir_tag}\n"
        f"{INDENT}Minutes: {p.minutes} - Seconds: {p.seconds}"
    )


def render_predictions(p: Predictions) -> str:
    lines = [
        f"{INDENT}Route: {p.route_title} - Tag: {p.route_tag}",
        f"{INDENT}Stop: {p.stop_title} - Tag: {p.stop_tag}",
    ]
    if not p.direction.predictions:
        title = p.dir_title_because_no_predictions or p.direction.title
        lines.append(f"{INDENT}No predictions{f' ({title})' if title else ''}")
        return "\n".join(lines)
    lines.append(f"{INDENT}Direction: {p.direction.title}")
    lines.extend(render_prediction(x) for x in p.direction.predictions)
    return "\n".join(lines)


def render_schedule(s: Schedule) -> str:
    lines = [
        f"{INDENT}Title: {s.title} - Tag: {s.tag}",
        f"{INDENT}Direction: {s.direction} - Service: {s.service_class} - Schedule: {s.schedule_class}",
    ]
    header = " | ".join(stop.content or stop.tag for stop in s.header.stops)
    if header:
        lines.append(f"{INDENT}{header}")
    for row in s.rows:
        times = " | ".join(stop.content for stop in row.stops)
        lines.append(f"{INDENT}[{row.block_id}] {times}")
    return "\n".join(lines)


def render_vehicle(v: Vehicle) -> str:
    return (
        f"{INDENT}Vehicle ID: {v.id} - Direction Tag: {v.dir_tag}\n"
        f"{INDENT}Route Tag: {v.route_tag} - Seconds Since: {v.secs_since_report}\n"
        f"{INDENT}Lon: {v.lon} - Lat: {v.lat} - Heading: {v.heading}"
    )


def render_vehicle_locations(v: VehicleLocations) -> str:
    lines = [f"{INDENT}Vehicles:"]
    lines.extend(render_vehicle(x) for x in v.vehicles)
    lines.append(f"{INDENT}Last Update: {v.last_time.time}")
    return "\n".join(lines)


def render_list(items: list[Any], render_one: Callable[[Any], str]) -> str:
    if not items:
        return f"{INDENT}(none)"
    return "\n".join(render_one(i) for i in items)
