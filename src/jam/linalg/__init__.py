"""
jam Linear Algebra Module.

Decompositions backed by numpy.linalg.

Classes:
    JamSVD: Singular value decomposition, inverse and pseudo-inverse
    JamEigen: Real eigen decomposition, determinants, unit eigenvectors
"""

from jam.linalg.eigen import JamEigen
from jam.linalg.svd import JamSVD

__all__ = ["JamSVD", "JamEigen"]
