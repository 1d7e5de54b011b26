"""Tests for the precomputed Q-factor, base-ratio and phase-factor tables."""

import math

import numpy as np
import pytest

from constantq.calculations import (
    LookupCache,
    calculate_base_freq_ratio,
    calculate_phase_factors,
    calculate_q_factor,
    default_cache,
    get_calculated_base_freq_ratio,
    get_calculated_phase_factors,
    get_calculated_q_factor,
)
from constantq.errors import ParamError, ParamErrorKind


class TestFormulas:
    @pytest.mark.parametrize("b", [1, 3, 12, 24, 36, 48])
    def test_q_factor_formula(self, b):
        assert calculate_q_factor(b) == pytest.approx(1.0 / (2.0 ** (1.0 / b) - 1.0))
        assert calculate_q_factor(b) > 0

    @pytest.mark.parametrize("b", [1, 5, 7, 10, 12])
    def test_base_freq_ratio_formula(self, b):
        ratio = calculate_base_freq_ratio(b)
        assert ratio == pytest.approx(2.0 ** (1.0 / b))
        assert ratio > 1.0

    def test_known_q_factors(self):
        assert get_calculated_q_factor(12) == pytest.approx(16.81715, rel=1e-5)
        assert get_calculated_q_factor(24) == pytest.approx(34.12708, rel=1e-5)
        assert get_calculated_q_factor(48) == pytest.approx(68.75063, rel=1e-5)

    def test_phase_factors_values(self):
        phases = calculate_phase_factors(128, 22050)
        expected = np.array([-2.0 * math.pi * n / 22050 for n in range(128)])
        assert phases.shape == (128,)
        assert phases[0] == 0.0
        np.testing.assert_allclose(phases, expected, rtol=1e-12)

    def test_phase_factors_strictly_decrease(self):
        phases = calculate_phase_factors(4096, 44100)
        assert np.all(np.diff(phases) < 0)


class TestLookupCache:
    def test_default_tables_cover_common_keys(self):
        cache = default_cache()
        for b in range(1, 13):
            assert b in cache
        assert (4096, 44100) in cache
        assert (256, 16000) in cache
        assert 48 not in cache
        assert (8192, 44100) not in cache

    def test_default_cache_is_shared(self):
        assert default_cache() is default_cache()

    @pytest.mark.parametrize("b", [1, 6, 12, 13, 24, 48])
    def test_hit_and_miss_agree_bit_for_bit(self, b):
        empty = LookupCache.build(bins_per_octave=(), window_lengths=(), sample_rates=())
        assert default_cache().q_factor(b) == empty.q_factor(b) == calculate_q_factor(b)
        assert (
            default_cache().base_freq_ratio(b)
            == empty.base_freq_ratio(b)
            == calculate_base_freq_ratio(b)
        )

    def test_phase_factor_hit_and_miss_agree(self):
        empty = LookupCache.build(bins_per_octave=(), window_lengths=(), sample_rates=())
        np.testing.assert_array_equal(
            default_cache().phase_factors(1024, 48000),
            empty.phase_factors(1024, 48000),
        )

    def test_miss_does_not_insert(self):
        cache = LookupCache.build()
        size = len(cache)
        cache.q_factor(96)
        cache.phase_factors(8192, 96000)
        assert len(cache) == size
        assert 96 not in cache
        assert (8192, 96000) not in cache

    def test_cached_phase_factors_are_read_only(self):
        phases = get_calculated_phase_factors(512, 22050)
        assert not phases.flags.writeable
        with pytest.raises(ValueError):
            phases[0] = 1.0

    def test_out_of_table_phase_factors_are_computed(self):
        phases = get_calculated_phase_factors(300, 12345)
        np.testing.assert_array_equal(phases, calculate_phase_factors(300, 12345))

    @pytest.mark.parametrize("b", [0, -3])
    def test_non_positive_bins_per_octave_rejected(self, b):
        with pytest.raises(ParamError) as info:
            get_calculated_q_factor(b)
        assert info.value.kind is ParamErrorKind.INVALID_BINS_PER_OCTAVE
        with pytest.raises(ParamError):
            get_calculated_base_freq_ratio(b)
