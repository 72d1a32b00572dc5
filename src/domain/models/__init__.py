from .calendar import ExceptionKind, Service
from .geo import Point
from .line import AssembledLine, Color, IncompleteLine, LineKind, begin_line
from .location import Location
from .shape import Shape
from .trip import Direction, Route, ScheduledTrip, StopVisit, TripBuffer

__all__ = [
    "AssembledLine",
    "Color",
    "Direction",
    "ExceptionKind",
    "IncompleteLine",
    "LineKind",
    "Location",
    "Point",
    "Route",
    "ScheduledTrip",
    "Service",
    "Shape",
    "StopVisit",
    "TripBuffer",
    "begin_line",
]
