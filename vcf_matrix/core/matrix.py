"""Genotype matrix container and the flat-buffer assembly step.

The reader accumulates one flat list of genotype codes in file order and
only allocates the 2-D array once the number of variants is known.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd

from ..config import GENOTYPE_DTYPE, MISSING_CODE

__all__ = ["GenotypeMatrix", "assemble_matrix"]


@dataclass
class GenotypeMatrix:
    """Variant x sample matrix of allele sums.

    Attributes
    ----------
    values : np.ma.MaskedArray
        Integer array of shape (n_variants, n_samples). Missing calls are
        masked, so reductions such as ``values.sum(axis=0)`` skip them;
        ``values.filled()`` gives ``MISSING_CODE`` in their place.
    row_labels : List[str]
        Variant ids (CHROM:POS:REF:ALT) in file order; may repeat.
    col_labels : List[str]
        Sample ids in header order.
    """

    values: np.ma.MaskedArray
    row_labels: List[str]
    col_labels: List[str]

    @property
    def shape(self):
        return self.values.shape

    @property
    def n_rows(self) -> int:
        return self.values.shape[0]

    @property
    def n_cols(self) -> int:
        return self.values.shape[1]

    def missing_mask(self) -> np.ndarray:
        return np.ma.getmaskarray(self.values)

    def to_frame(self) -> pd.DataFrame:
        """Return a DataFrame with nullable Int64 columns (missing -> pd.NA)."""
        index = pd.Index(self.row_labels, name="variant", dtype=object)
        columns = pd.Index(self.col_labels, name="sample", dtype=object)
        missing = self.missing_mask()
        data = self.values.filled(MISSING_CODE)
        cols = {
            j: pd.arrays.IntegerArray(data[:, j].astype("int64"), missing[:, j].copy())
            for j in range(self.n_cols)
        }
        df = pd.DataFrame(cols, index=pd.RangeIndex(self.n_rows))
        df.index = index
        df.columns = columns
        return df

    def equals(self, other: "GenotypeMatrix") -> bool:
        return (
            self.row_labels == other.row_labels
            and self.col_labels == other.col_labels
            and np.array_equal(self.missing_mask(), other.missing_mask())
            and np.array_equal(self.values.filled(MISSING_CODE), other.values.filled(MISSING_CODE))
        )


def assemble_matrix(codes: Sequence[int], row_labels: List[str], col_labels: List[str]) -> GenotypeMatrix:
    """Fill a (rows x cols) matrix row-major from a flat code buffer.

    Cells holding ``MISSING_CODE`` are masked in the result.
    """
    n_rows, n_cols = len(row_labels), len(col_labels)
    if len(codes) != n_rows * n_cols:
        raise ValueError(
            f"genotype buffer holds {len(codes)} codes, expected {n_rows} x {n_cols} = {n_rows * n_cols}"
        )
    raw = np.empty((n_rows, n_cols), dtype=GENOTYPE_DTYPE)
    if n_rows and n_cols:
        raw[...] = np.asarray(codes, dtype=GENOTYPE_DTYPE).reshape(n_rows, n_cols)
    values = np.ma.masked_array(raw, mask=raw == MISSING_CODE, fill_value=MISSING_CODE)
    return GenotypeMatrix(values=values, row_labels=list(row_labels), col_labels=list(col_labels))
