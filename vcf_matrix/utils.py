"""Small pure helpers used by the VCF matrix reader.

Line classification, tokenisation, genotype decoding and variant id
construction live here so each can be unit-tested without touching a file.
"""
from enum import Enum
import re
from typing import List, Optional, Sequence

from .config import MISSING_CODE, TOKEN_DELIMITERS, VARIANT_ID_SEP
from .exceptions import MalformedTokenError

_SPLIT_RE = re.compile("[" + re.escape(TOKEN_DELIMITERS) + "]")


class LineKind(Enum):
    META = "meta"
    COLUMN_HEADER = "column_header"
    DATA = "data"


def classify_line(line: str) -> LineKind:
    """Classify a raw VCF line from its first two characters.

    '##...' -> META, '#...' -> COLUMN_HEADER, anything else (including an
    empty line) -> DATA.
    """
    if line.startswith("##"):
        return LineKind.META
    if line.startswith("#"):
        return LineKind.COLUMN_HEADER
    return LineKind.DATA


def tokenize_line(line: str) -> List[str]:
    """Split a line on tab / LF / CR, keeping empty inner fields.

    A line ending exactly at a delimiter does not yield an empty final token.
    Example: 'a\\tb\\t\\tc\\n' -> ['a', 'b', '', 'c']
    """
    if not line:
        return []
    toks = _SPLIT_RE.split(line)
    if toks[-1] == "":
        toks.pop()
    return toks


def decode_genotype(token: str, line_number: Optional[int] = None) -> int:
    """Encode a diploid GT token as the sum of its two allele digits.

    Only characters 0 and 2 are read; character 1 is the separator ('/', '|'
    or anything else). A leading '.' means missing and returns MISSING_CODE.
    Alleles must be single digits: '0/1' -> 1, '1|1' -> 2, './.' -> -9,
    '0/1:35:20' -> 1.
    """
    if token[:1] == ".":
        return MISSING_CODE
    if len(token) < 3:
        raise MalformedTokenError("genotype needs at least 3 characters", token, line_number)
    a, b = token[0], token[2]
    if not ("0" <= a <= "9" and "0" <= b <= "9"):
        raise MalformedTokenError("alleles must be single digits 0-9 or '.'", token, line_number)
    return (ord(a) - 48) + (ord(b) - 48)


def variant_id(tokens: Sequence[str]) -> str:
    """Return CHROM:POS:REF:ALT built from fields 0, 1, 3 and 4."""
    return VARIANT_ID_SEP.join((tokens[0], tokens[1], tokens[3], tokens[4]))


__all__ = [
    "LineKind",
    "classify_line",
    "tokenize_line",
    "decode_genotype",
    "variant_id",
]
