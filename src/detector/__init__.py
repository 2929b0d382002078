"""Model construction: profile aggregation and detector handles."""

from .factory import DetectorFactory
from .handle import DetectorModel, snapshot_state
from .state import ModelState

__all__ = ["DetectorFactory", "DetectorModel", "ModelState", "snapshot_state"]
