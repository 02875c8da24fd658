"""Tests for the line classifier, tokenizer and genotype decoder."""

import pytest

from vcf_matrix.config import MISSING_CODE
from vcf_matrix.exceptions import MalformedTokenError
from vcf_matrix.utils import LineKind, classify_line, decode_genotype, tokenize_line, variant_id


class TestClassifyLine:
    def test_meta(self) -> None:
        assert classify_line("##fileformat=VCFv4.2") is LineKind.META

    def test_column_header(self) -> None:
        assert classify_line("#CHROM\tPOS") is LineKind.COLUMN_HEADER

    def test_data(self) -> None:
        assert classify_line("20\t100\t.\tA\tT") is LineKind.DATA

    def test_single_hash_only(self) -> None:
        assert classify_line("#") is LineKind.COLUMN_HEADER

    def test_empty_line_is_data(self) -> None:
        assert classify_line("") is LineKind.DATA
        assert classify_line("\t\t") is LineKind.DATA


class TestTokenizeLine:
    def test_tabs(self) -> None:
        assert tokenize_line("a\tb\tc") == ["a", "b", "c"]

    def test_trailing_delimiter_suppressed(self) -> None:
        """A line ending at a delimiter yields no empty final token."""
        assert tokenize_line("a\tb\n") == ["a", "b"]
        assert tokenize_line("a\tb\t") == ["a", "b"]

    def test_empty_inner_fields_kept(self) -> None:
        assert tokenize_line("a\t\tb") == ["a", "", "b"]
        assert tokenize_line("a\t\t") == ["a", ""]

    def test_cr_and_lf_split(self) -> None:
        assert tokenize_line("a\rb\nc") == ["a", "b", "c"]

    def test_spaces_not_split(self) -> None:
        assert tokenize_line("a b\tc") == ["a b", "c"]

    def test_empty(self) -> None:
        assert tokenize_line("") == []


class TestDecodeGenotype:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("0/0", 0),
            ("0/1", 1),
            ("1/0", 1),
            ("1/1", 2),
            ("0|1", 1),
            ("1|1", 2),
            ("1-1", 2),
            ("2/3", 5),
            ("0/1:35:20,15", 1),
        ],
    )
    def test_allele_sum(self, token: str, expected: int) -> None:
        assert decode_genotype(token) == expected

    @pytest.mark.parametrize("token", ["./.", ".|.", ".", "./1", ".:0"])
    def test_missing(self, token: str) -> None:
        assert decode_genotype(token) == MISSING_CODE

    @pytest.mark.parametrize("token", ["0", "01", "", "1/"])
    def test_too_short(self, token: str) -> None:
        with pytest.raises(MalformedTokenError):
            decode_genotype(token)

    @pytest.mark.parametrize("token", ["0/.", "a/1", "10/1", "1/a"])
    def test_non_digit_allele(self, token: str) -> None:
        with pytest.raises(MalformedTokenError) as exc:
            decode_genotype(token, line_number=7)
        assert exc.value.token == token
        assert exc.value.line_number == 7
        assert "line 7" in str(exc.value)


def test_variant_id() -> None:
    toks = ["20", "100", "rs1", "A", "T", ".", ".", ".", "GT"]
    assert variant_id(toks) == "20:100:A:T"
