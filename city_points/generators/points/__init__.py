from .generator import PointGenerator, generate, boundary_anchors
from .strategies import STRATEGIES

__all__ = ["PointGenerator", "generate", "boundary_anchors", "STRATEGIES"]
