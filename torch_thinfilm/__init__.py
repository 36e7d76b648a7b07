__version__ = "1.0.0"

# Import key classes from submodules for a flat public API.
from .layer import Layer, Medium  # stack description
from .char_matrix import CharacteristicMatrix
from .simulate import (
    AbsorbingIncidentMediumWarning,
    OutputRequest,
    SimulationResult,
    simulate,
)
from .model import Model  # convenience wrapper
from .complex_trig import acos, asin

# Define the public API for the package.
__all__ = [
    "Layer",
    "Medium",
    "CharacteristicMatrix",
    "OutputRequest",
    "SimulationResult",
    "AbsorbingIncidentMediumWarning",
    "simulate",
    "Model",
    "asin",
    "acos",
]
