"""
Matrixarith
~~~~~~~~~~~

Dense matrix arithmetic over floating point values.


"""

from . import data, simulation, visualization
from .highlevel import ZERO, Matrix

__all__ = ["data", "simulation", "visualization", "Matrix", "ZERO"]
