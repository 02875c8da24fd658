"""I/O subpackage.

Exposes the bounded gzip line source and the streaming VCF matrix reader.
"""

from .line_source import LineSource, is_gzipped  # noqa: F401
from .vcf_reader import BuilderState, VCFMatrixBuilder, read_vcf, read_vcf_frame  # noqa: F401

__all__ = ["LineSource", "is_gzipped", "BuilderState", "VCFMatrixBuilder", "read_vcf", "read_vcf_frame"]
