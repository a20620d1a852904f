from .geo import GeoLocation, UtmLocation
from .line import Line, TransportationType
from .location import LocationInput, PlannerLocationInput
from .place import Area, House, OtherPlace, Place, PlaceType, Poi, Stop, Street
from .planner import TransitStage, TravelProposal, TravelStage, WalkingStage
from .realtime import Deviation, RealtimeDestination, RealtimePlatform, RealtimeVisit

__all__ = [
    "Area",
    "Deviation",
    "GeoLocation",
    "House",
    "Line",
    "LocationInput",
    "OtherPlace",
    "Place",
    "PlaceType",
    "PlannerLocationInput",
    "Poi",
    "RealtimeDestination",
    "RealtimePlatform",
    "RealtimeVisit",
    "Stop",
    "Street",
    "TransitStage",
    "TransportationType",
    "TravelProposal",
    "TravelStage",
    "UtmLocation",
    "WalkingStage",
]
