"""Matrix container and assembly."""

from .matrix import GenotypeMatrix, assemble_matrix  # noqa: F401

__all__ = ["GenotypeMatrix", "assemble_matrix"]
