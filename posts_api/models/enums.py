"""Enum types for the enumerated post fields and store failure kinds."""

from enum import Enum, IntEnum


class AppCategory(IntEnum):
    """Which app section a post belongs to."""
    news = 1
    events = 2


class NewsCategory(IntEnum):
    """Motorsport category of a post."""
    formula_1 = 1
    formula_e = 2
    supercars = 3
    wec = 4
    nascar = 5
    indycar = 6
    esports = 7
    open_wheel = 8
    enduro = 9
    stock = 10
    drag = 11
    rally = 12
    off_road = 13
    touring = 14
    moto_gp = 15
    motocross = 16
    other = 17


class Region(IntEnum):
    """Audience region of a post."""
    world = 1
    nz = 2


class ErrorKind(str, Enum):
    """Client-facing classification of datastore failures."""
    conditional_check_failed = "ConditionalCheckFailed"
    access_denied = "AccessDenied"
    throttled = "Throttled"
    store_failure = "StoreFailure"
    store_unavailable = "StoreUnavailable"
