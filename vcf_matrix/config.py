"""Constants shared across the vcf_matrix package."""

import numpy as np

# Longest line accepted from the input stream, in characters.
MAX_LINE_LENGTH = 1_000_000

# Code stored for a genotype whose first allele is '.'.
MISSING_CODE = -9

# Characters a VCF line is split on.
TOKEN_DELIMITERS = "\t\n\r"

# CHROM POS ID REF ALT QUAL FILTER INFO FORMAT
N_FIXED_COLUMNS = 9

# First two bytes of a gzip (and bgzip) member.
GZIP_MAGIC = b"\x1f\x8b"

VARIANT_ID_SEP = ":"

GENOTYPE_DTYPE = np.int32
