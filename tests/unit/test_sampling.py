"""Tests for unbiased bounded sampling."""

from __future__ import annotations

import numpy as np
import pytest

from oddkit._bits import MASK64
from oddkit.generator import Xoshiro256StarStar
from oddkit.sampling import is_power_of_two, one_in, uniform_bounded


class ScriptedGenerator:
    """Replays a fixed list of 64-bit draws and counts them."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = 0

    def next_u64(self) -> int:
        if self.calls >= len(self._draws):
            raise AssertionError("generator drawn more often than expected")
        value = self._draws[self.calls]
        self.calls += 1
        return value


class TestIsPowerOfTwo:
    def test_powers(self):
        for k in range(64):
            assert is_power_of_two(1 << k)

    def test_non_powers(self):
        for value in (0, 3, 6, 37, 100, MASK64):
            assert not is_power_of_two(value)


class TestUniformBounded:
    """Tests for uniform_bounded()."""

    def test_zero_bound_returns_zero_without_drawing(self):
        rng = ScriptedGenerator([])
        assert uniform_bounded(rng, 0) == 0
        assert rng.calls == 0

    def test_power_of_two_masks_one_draw(self):
        rng = ScriptedGenerator([0xFF])
        assert uniform_bounded(rng, 8) == 7
        assert rng.calls == 1

    def test_bound_one(self):
        rng = ScriptedGenerator([MASK64])
        assert uniform_bounded(rng, 1) == 0
        assert rng.calls == 1

    def test_lemire_accepts_high_word(self):
        # 2**64 mod 3 == 1; MASK64 * 3 has low word 2**64 - 3 >= 1.
        rng = ScriptedGenerator([MASK64])
        assert uniform_bounded(rng, 3) == 2
        assert rng.calls == 1

    def test_lemire_rejects_below_threshold(self):
        """A zero draw gives low word 0 < threshold and must be redrawn."""
        rng = ScriptedGenerator([0, MASK64])
        assert uniform_bounded(rng, 3) == 2
        assert rng.calls == 2

    def test_modulo_rejects_above_limit(self):
        # MASK64 is divisible by 3, so the limit is MASK64 itself.
        rng = ScriptedGenerator([MASK64, 5])
        assert uniform_bounded(rng, 3, method="modulo") == 2
        assert rng.calls == 2

    def test_modulo_reduces(self):
        rng = ScriptedGenerator([100])
        assert uniform_bounded(rng, 37, method="modulo") == 100 % 37

    @pytest.mark.parametrize("method", ["lemire", "modulo"])
    @pytest.mark.parametrize("bound", [2, 3, 6, 37, 100, 1000, 1 << 40, MASK64])
    def test_in_range(self, method, bound):
        rng = Xoshiro256StarStar(1337)
        for _ in range(2000):
            assert 0 <= uniform_bounded(rng, bound, method) < bound

    def test_deterministic(self):
        a = Xoshiro256StarStar(99)
        b = Xoshiro256StarStar(99)
        assert [uniform_bounded(a, 37) for _ in range(100)] == [
            uniform_bounded(b, 37) for _ in range(100)
        ]

    def test_largest_bound_accepted(self):
        rng = Xoshiro256StarStar(5)
        assert uniform_bounded(rng, MASK64) < MASK64

    @pytest.mark.parametrize("bound", [-1, 1 << 64])
    def test_out_of_range_bound(self, bound):
        with pytest.raises(ValueError, match="bound"):
            uniform_bounded(Xoshiro256StarStar(1), bound)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown sampling method"):
            uniform_bounded(Xoshiro256StarStar(1), 10, method="naive")

    @pytest.mark.parametrize("bound", [2.5, 10.0, "10"])
    def test_non_integer_bound(self, bound):
        with pytest.raises(TypeError, match="integer"):
            uniform_bounded(Xoshiro256StarStar(1), bound)

    @pytest.mark.parametrize("bound", [np.uint64(10), np.int64(10)])
    def test_numpy_integer_bound(self, bound):
        a = Xoshiro256StarStar(8)
        b = Xoshiro256StarStar(8)
        assert uniform_bounded(a, bound) == uniform_bounded(b, 10)


class TestOneIn:
    """Tests for one_in()."""

    def test_one_is_certain(self):
        rng = ScriptedGenerator([])
        assert all(one_in(rng, 1) for _ in range(100))
        assert rng.calls == 0

    def test_zero_is_certain(self):
        rng = ScriptedGenerator([])
        assert one_in(rng, 0) is True

    def test_hit_on_zero_sample(self):
        # Power-of-two bound: low bits 0 -> sample 0 -> hit.
        assert one_in(ScriptedGenerator([0x100]), 4) is True
        assert one_in(ScriptedGenerator([0x101]), 4) is False

    def test_negative_bound(self):
        with pytest.raises(ValueError):
            one_in(Xoshiro256StarStar(1), -5)

    def test_fractional_bound(self):
        with pytest.raises(TypeError):
            one_in(Xoshiro256StarStar(1), 0.5)

    def test_one_in_two_roughly_half(self):
        rng = Xoshiro256StarStar(2024)
        hits = sum(one_in(rng, 2) for _ in range(20_000))
        assert 9_500 <= hits <= 10_500
