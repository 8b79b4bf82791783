"""Page components that consume the HTTP API."""

from .home_page import HomePage
from .states import DisplayItem, Failed, HomePageState, Idle, Loaded, Loading

__all__ = [
    "DisplayItem",
    "Failed",
    "HomePage",
    "HomePageState",
    "Idle",
    "Loaded",
    "Loading",
]
