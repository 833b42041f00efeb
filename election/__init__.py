#!filepath: election/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import ElectionError, InvalidArgument, InvalidState, SamplingExhausted
from .random_source import NumpyRandomSource, RandomSource
from .world import Distribution, Removal, World
from .config.app_config import AppConfig

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "ElectionError", "InvalidArgument", "InvalidState", "SamplingExhausted",
    "RandomSource", "NumpyRandomSource",
    "Distribution", "Removal", "World",
    "AppConfig",
]
