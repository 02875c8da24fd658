"""Shared fixtures: small VCF files written into tmp_path."""

import gzip
from pathlib import Path
from typing import Callable, List

import pytest

META = [
    "##fileformat=VCFv4.2",
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">',
]
FIXED = ["#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO", "FORMAT"]


def header_line(samples: List[str]) -> str:
    return "\t".join(FIXED + list(samples))


def data_line(chrom: str, pos: int, ref: str, alt: str, gts: List[str]) -> str:
    return "\t".join([chrom, str(pos), ".", ref, alt, ".", ".", ".", "GT"] + list(gts))


@pytest.fixture
def write_vcf(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing lines to a gzip (default) or plain file."""

    def _write(lines: List[str], name: str = "test.vcf.gz", compress: bool = True, newline: str = "\n") -> Path:
        path = tmp_path / name
        text = newline.join(lines) + newline
        if compress:
            with gzip.open(path, "wt", newline="") as f:
                f.write(text)
        else:
            path.write_bytes(text.encode())
        return path

    return _write


@pytest.fixture
def example_vcf(write_vcf) -> Path:
    """Two samples, three variants, one missing call."""
    return write_vcf(
        META
        + [
            header_line(["S1", "S2"]),
            data_line("20", 100, "A", "T", ["0/1", "./."]),
            data_line("20", 200, "G", "C", ["1/1", "0/0"]),
            data_line("20", 300, "C", "A", ["0|0", "1|0"]),
        ]
    )
