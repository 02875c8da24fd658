"""Streaming VCF reader producing a variant x sample genotype matrix.

Only the GT call of each sample column is interpreted, as the sum of two
single-digit alleles (0/0 -> 0, 0/1 -> 1, 1/1 -> 2, ./. -> missing).
Multi-allelic, phased or non-diploid semantics are not modelled.

The reader makes one pass: lines are folded into a ``VCFMatrixBuilder``
which keeps sample ids, variant ids and a flat code buffer; the matrix is
allocated once, at the end, by ``assemble_matrix``.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import List, Optional

import pandas as pd

from ..config import MAX_LINE_LENGTH, N_FIXED_COLUMNS
from ..core.matrix import GenotypeMatrix, assemble_matrix
from ..exceptions import (
	BuilderStateError,
	DuplicateHeaderError,
	HeaderMissingError,
	SchemaMismatchError,
)
from ..utils import LineKind, classify_line, decode_genotype, tokenize_line, variant_id
from .line_source import LineSource

logger = logging.getLogger(__name__)


class BuilderState(Enum):
	AWAITING_HEADER = "awaiting_header"
	HEADER_SEEN = "header_seen"
	ACCUMULATING = "accumulating"
	DONE = "done"


class VCFMatrixBuilder:
	"""Fold VCF lines, one at a time, into a genotype matrix.

	Usage::

		builder = VCFMatrixBuilder()
		for line in lines:
			builder.feed(line)
		mat = builder.finish()

	``feed`` accepts a line with or without its terminator. An optional
	``line_number`` is only used to annotate errors.
	"""

	def __init__(self):
		self.state = BuilderState.AWAITING_HEADER
		self.samples: List[str] = []
		self.variant_ids: List[str] = []
		self.codes: List[int] = []

	@property
	def n_variants(self) -> int:
		return len(self.variant_ids)

	@property
	def n_samples(self) -> int:
		return len(self.samples)

	def feed(self, line: str, line_number: Optional[int] = None) -> LineKind:
		if self.state is BuilderState.DONE:
			raise BuilderStateError("cannot feed lines after finish()")
		kind = classify_line(line)
		if kind is LineKind.META:
			return kind
		if kind is LineKind.COLUMN_HEADER:
			self._read_header(line, line_number)
		else:
			self._read_record(line, line_number)
		return kind

	# -- internal helpers -------------------------------------------------
	def _read_header(self, line: str, line_number: Optional[int]) -> None:
		if self.state is not BuilderState.AWAITING_HEADER:
			raise DuplicateHeaderError("second #CHROM header line", line_number)
		toks = tokenize_line(line)
		# VCF fixed columns then samples from index 9
		self.samples = toks[N_FIXED_COLUMNS:]
		self.state = BuilderState.HEADER_SEEN
		logger.debug("Header found with %d samples", len(self.samples))

	def _read_record(self, line: str, line_number: Optional[int]) -> None:
		if self.state is BuilderState.AWAITING_HEADER:
			raise HeaderMissingError("data line found before the #CHROM header", line_number)
		toks = tokenize_line(line)
		expected = len(self.samples) + N_FIXED_COLUMNS
		if len(toks) != expected:
			raise SchemaMismatchError(expected, len(toks), line_number)
		codes = [decode_genotype(t, line_number) for t in toks[N_FIXED_COLUMNS:]]
		self.variant_ids.append(variant_id(toks))
		self.codes.extend(codes)
		self.state = BuilderState.ACCUMULATING

	def finish(self) -> GenotypeMatrix:
		if self.state is BuilderState.DONE:
			raise BuilderStateError("finish() already called")
		if self.state is BuilderState.AWAITING_HEADER:
			raise HeaderMissingError("no #CHROM header line found")
		self.state = BuilderState.DONE
		mat = assemble_matrix(self.codes, self.variant_ids, self.samples)
		# the flat buffer is not needed once the matrix exists
		self.codes = []
		return mat


def read_vcf(path: str, max_variants: Optional[int] = None, max_line_length: int = MAX_LINE_LENGTH) -> GenotypeMatrix:
	"""Read a gzip/bgzip compressed VCF into a ``GenotypeMatrix``.

	Parameters
	----------
	path : str
		VCF file; gzip/bgzip compressed or plain text.
	max_variants : int | None
		Stop after this many data lines (for testing / quick looks).
	max_line_length : int
		Longest accepted line in characters.

	Returns
	-------
	GenotypeMatrix
		Rows are variants (CHROM:POS:REF:ALT, file order), columns are
		samples (header order).

	Raises
	------
	CannotOpenError, SchemaMismatchError, MalformedTokenError,
	HeaderMissingError, DuplicateHeaderError, CorruptStreamError
		Any failure aborts the read; no partial matrix is returned.
	"""
	builder = VCFMatrixBuilder()
	with LineSource(path, max_line_length=max_line_length) as src:
		for line in src:
			kind = builder.feed(line, src.line_number)
			if kind is LineKind.DATA and max_variants and builder.n_variants >= max_variants:
				break
	mat = builder.finish()
	logger.debug("Read %d variants x %d samples from %s", mat.n_rows, mat.n_cols, path)
	return mat


def read_vcf_frame(path: str, max_variants: Optional[int] = None, max_line_length: int = MAX_LINE_LENGTH) -> pd.DataFrame:
	"""Same as ``read_vcf`` but return a DataFrame with nullable Int64 cells."""
	return read_vcf(path, max_variants=max_variants, max_line_length=max_line_length).to_frame()
