"""Command line interface for vcf_matrix.

Current subcommands:
	summary  – read the genotype matrix and report its dimensions and
	           per-sample missing call counts

Example:
	python -m vcf_matrix.cli summary --vcf input.vcf.gz --max-variants 5000
"""

from __future__ import annotations

import argparse
import sys

from .exceptions import VCFMatrixError
from .io import read_vcf


def cmd_summary(args: argparse.Namespace) -> int:
	try:
		mat = read_vcf(args.vcf, max_variants=args.max_variants)
	except VCFMatrixError as e:
		print(f"[ERROR] {e}", file=sys.stderr)
		return 1

	print(f"Variants: {mat.n_rows:,}")
	print(f"Samples: {mat.n_cols:,}")
	if mat.n_rows == 0 or mat.n_cols == 0:
		return 0

	missing = mat.missing_mask()
	total_missing = int(missing.sum())
	print(f"Missing calls: {total_missing:,} ({100 * total_missing / missing.size:.2f}%)")
	if args.per_sample:
		per_sample = missing.sum(axis=0)
		print("Sample\tMissing\tMissingRate")
		for sample, n in zip(mat.col_labels, per_sample):
			print(f"{sample}\t{int(n)}\t{n / mat.n_rows:.4f}")
	return 0


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="vcf-matrix", description="VCF genotype matrix reader")
	sub = p.add_subparsers(dest="command")
	sp = sub.add_parser("summary", help="Matrix dimensions and missing call counts")
	sp.add_argument("--vcf", required=True, help="Input VCF.GZ (or plain VCF) file")
	sp.add_argument("--max-variants", type=int, default=None, help="Limit number of variant lines parsed (debug)")
	sp.add_argument("--per-sample", action="store_true", help="Also print missing calls per sample")
	sp.set_defaults(func=cmd_summary)
	return p


def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if not hasattr(args, 'func'):
		parser.print_help()
		return 1
	return args.func(args)


if __name__ == "__main__":  # pragma: no cover
	sys.exit(main())
