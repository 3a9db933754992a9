from .base import KMeansBase
from .cpu_numpy import KMeansCPUNumpy, numpy_kmeans
from .result import KMeansResult

__all__ = [
    "KMeansBase",
    "KMeansCPUNumpy",
    "KMeansResult",
    "numpy_kmeans",
]
