from .parameters import PwvdParameters, PwvdRequest
from .results import DistributionResult

__all__ = [
    "PwvdParameters",
    "PwvdRequest",
    "DistributionResult",
]
