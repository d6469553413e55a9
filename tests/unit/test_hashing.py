"""
Unit tests for FNV-1a hashing.

Run: pytest tests/unit/test_hashing.py -v
"""
from coursegate.core.hashing import FNV_OFFSET_BASIS, fnv1a32


class TestFnv1a32:
    def test_empty_string_is_offset_basis(self):
        assert fnv1a32("") == FNV_OFFSET_BASIS == 0x811C9DC5

    def test_reference_vectors(self):
        assert fnv1a32("a") == 0xE40C292C
        assert fnv1a32("foobar") == 0xBF9CF968

    def test_result_fits_in_32_bits(self):
        for value in ("u1:test:s1:q1", "x" * 500, "ünïcødé"):
            assert 0 <= fnv1a32(value) <= 0xFFFFFFFF

    def test_stable_across_calls(self):
        assert fnv1a32("u1:quiz:s1:q7") == fnv1a32("u1:quiz:s1:q7")

    def test_different_inputs_differ(self):
        assert fnv1a32("u1:quiz:s1:q1") != fnv1a32("u1:quiz:s1:q2")
