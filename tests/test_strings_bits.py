import pytest

from algorithms.bits.operators import bitwise, count_set_bits, power_of_two
from algorithms.strings.kmp import kmp
from algorithms.strings.rabin_karp import rabin_karp
from engine import materialize


def naive_matches(text, pattern):
    return tuple(i for i in range(len(text) - len(pattern) + 1) if text[i:i + len(pattern)] == pattern)


CASES = [
    ("ABABDABACDABABCABAB", "ABABCABAB"),
    ("AAAAA", "AA"),
    ("GEEKS FOR GEEKS", "GEEK"),
    ("abc", "d"),
    ("short", "much longer"),
]


# ---------------------------------------------------------------------------
# Pattern matching
# ---------------------------------------------------------------------------
class TestKMP:
    @pytest.mark.parametrize("text,pattern", CASES)
    def test_matches_naive_search(self, text, pattern):
        assert materialize(kmp(text, pattern)).last.matches == naive_matches(text, pattern)

    def test_lps_table(self):
        last = materialize(kmp("x", "AABAACAABAA")).last
        assert last.lps == (0, 1, 0, 1, 2, 0, 1, 2, 3, 4, 5)

    def test_empty_pattern(self):
        seq = materialize(kmp("abc", ""))
        assert len(seq) == 1
        assert "empty" in seq.last.message


class TestRabinKarp:
    @pytest.mark.parametrize("text,pattern", CASES)
    def test_matches_naive_search(self, text, pattern):
        assert materialize(rabin_karp(text, pattern)).last.matches == naive_matches(text, pattern)

    def test_spurious_hit_is_rejected(self):
        # with modulus 2 only the parity of the last character counts: 'a' and 'c' collide
        seq = materialize(rabin_karp("ab", "c", modulus=2))
        assert any(s.message.startswith("Spurious hit at 0") for s in seq)
        assert seq.last.matches == ()

    def test_hashes_are_reported(self):
        seq = materialize(rabin_karp("abcabc", "abc"))
        assert all(s.hash_pattern == seq.last.hash_pattern for s in seq)
        assert seq.last.hash_pattern is not None

    def test_empty_pattern(self):
        assert len(materialize(rabin_karp("abc", ""))) == 1


# ---------------------------------------------------------------------------
# Bits
# ---------------------------------------------------------------------------
class TestBitwise:
    @pytest.mark.parametrize("op,a,b,expected", [
        ("AND", 12, 10, 8),
        ("OR", 12, 10, 14),
        ("XOR", 12, 10, 6),
        ("NOT", 5, 0, 250),
        ("LSHIFT", 200, 1, 144),
        ("RSHIFT", 12, 2, 3),
    ])
    def test_results(self, op, a, b, expected):
        assert materialize(bitwise(op, a, b)).last.result == expected

    def test_one_step_per_bit(self):
        seq = materialize(bitwise("AND", 3, 1))
        per_bit = [s for s in seq if s.line_number == 2]
        assert len(per_bit) == 8
        assert [s.rows[0].highlight for s in per_bit] == [(i,) for i in range(8)]

    @pytest.mark.parametrize("a,b", [(256, 1), (-1, 1), (1, 300)])
    def test_out_of_width_operands(self, a, b):
        seq = materialize(bitwise("AND", a, b))
        assert len(seq) == 1
        assert "does not fit" in seq.last.message

    def test_unknown_operation(self):
        assert len(materialize(bitwise("NAND", 1, 1))) == 1


class TestCountSetBits:
    @pytest.mark.parametrize("value", [0, 1, 29, 128, 255])
    def test_matches_bin_count(self, value):
        last = materialize(count_set_bits(value)).last
        assert last.result == bin(value).count("1")

    def test_one_step_per_set_bit(self):
        seq = materialize(count_set_bits(29))
        assert len([s for s in seq if s.line_number == 7]) == 4


class TestPowerOfTwo:
    @pytest.mark.parametrize("value,expected", [(16, 1), (1, 1), (12, 0), (0, 0), (128, 1)])
    def test_verdict(self, value, expected):
        assert materialize(power_of_two(value)).last.result == expected
