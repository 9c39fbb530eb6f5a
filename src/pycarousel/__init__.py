"""pycarousel - State store for carousel/slider widgets."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycarousel")
except PackageNotFoundError:
    __version__ = "0+local"
from pycarousel.binding import StoreBinding, StoreHandle
from pycarousel.config import StoreConfig
from pycarousel.exceptions import (
    CarouselBindingError,
    CarouselConfigError,
    CarouselError,
    ReentrantUpdateError,
)
from pycarousel.models import CarouselState, Direction, Orientation, SpinnerRecord
from pycarousel.state.policy import ReentrancyPolicy
from pycarousel.state.spinner import MasterSpinnerTracker
from pycarousel.state.store import CarouselStore
from pycarousel.state.subscribers import SubscriberRegistry

__all__ = [
    "__version__",
    "CarouselBindingError",
    "CarouselConfigError",
    "CarouselError",
    "CarouselState",
    "CarouselStore",
    "Direction",
    "MasterSpinnerTracker",
    "Orientation",
    "ReentrancyPolicy",
    "ReentrantUpdateError",
    "SpinnerRecord",
    "StoreBinding",
    "StoreConfig",
    "StoreHandle",
    "SubscriberRegistry",
]
