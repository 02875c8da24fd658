"""Read a VCF into a genotype matrix and print a few summaries.

Usage:
    python examples/read_matrix.py calls.vcf.gz
"""
import sys

from vcf_matrix import read_vcf


def main(path: str) -> None:
    mat = read_vcf(path)
    df = mat.to_frame()
    print(f"{mat.n_rows:,} variants x {mat.n_cols:,} samples")
    print(df.head())
    # alternate allele dosage summed per sample, ignoring missing calls
    print(df.sum(axis=0).sort_values(ascending=False).head(10))
    print(f"Missing rate per variant (first rows):\n{df.isna().mean(axis=1).head()}")


if __name__ == "__main__":
    main(sys.argv[1])
