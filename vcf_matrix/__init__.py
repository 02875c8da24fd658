"""vcf_matrix – read a gzip/bgzip VCF into a variant x sample genotype matrix.

Subpackages:
	io    – bounded line source and the streaming matrix builder
	core  – ``GenotypeMatrix`` and the flat-buffer assembly step

Typical use::

	from vcf_matrix import read_vcf

	mat = read_vcf("calls.vcf.gz")
	mat.shape            # (n_variants, n_samples)
	df = mat.to_frame()  # Int64 cells, pd.NA for missing calls
"""

from .config import MISSING_CODE
from .core import GenotypeMatrix
from .exceptions import (
	CannotOpenError,
	CorruptStreamError,
	MalformedTokenError,
	SchemaMismatchError,
	VCFFormatError,
	VCFMatrixError,
)
from .io import read_vcf, read_vcf_frame

__version__ = "0.1.0"
__all__ = [
	"read_vcf",
	"read_vcf_frame",
	"GenotypeMatrix",
	"MISSING_CODE",
	"VCFMatrixError",
	"VCFFormatError",
	"CannotOpenError",
	"CorruptStreamError",
	"SchemaMismatchError",
	"MalformedTokenError",
	"__version__",
]
