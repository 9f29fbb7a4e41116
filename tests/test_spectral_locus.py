"""Tests for the spectral locus table and nearest sample search."""
import math
import random

import numpy as np
import pytest

from CIEComparator.Observer.SpectralLocus import DEFAULT_LOCUS, SPECTRAL_LOCUS, SpectralLocus
from CIEComparator.Utils.CustomTypes import SpectralLocusSample


class TestTable:
    """Test the fixed locus table."""

    def test_size_and_range(self):
        """81 samples from 380 to 780nm in 5nm steps."""
        assert len(SPECTRAL_LOCUS) == 81
        assert SPECTRAL_LOCUS[0].wavelength == 380
        assert SPECTRAL_LOCUS[-1].wavelength == 780
        assert all(b.wavelength - a.wavelength == 5 for a, b in zip(SPECTRAL_LOCUS, SPECTRAL_LOCUS[1:]))

    def test_known_samples(self):
        """Spot check a few coordinates."""
        by_wl = {s.wavelength: s for s in SPECTRAL_LOCUS}
        assert by_wl[520].coordinate == (0.0743, 0.8338)
        assert by_wl[600].coordinate == (0.6270, 0.3725)
        assert by_wl[780].coordinate == (0.7347, 0.2653)

    def test_wavelengths_array(self):
        """wavelengths is a numpy array in table order."""
        assert DEFAULT_LOCUS.wavelengths.shape == (81,)
        assert DEFAULT_LOCUS.wavelengths[10] == 430

    def test_empty_table_rejected(self):
        """An empty table is a construction error."""
        with pytest.raises(ValueError):
            SpectralLocus([])

    def test_unordered_table_rejected(self):
        """Samples must be in ascending wavelength order."""
        with pytest.raises(ValueError):
            SpectralLocus([SpectralLocusSample(500, 0.0, 0.5), SpectralLocusSample(480, 0.1, 0.1)])


class TestNearest:
    """Test the nearest sample search."""

    def test_matches_brute_force(self):
        """The returned sample is at least as close as every other sample."""
        rng = random.Random(1931)
        for _ in range(200):
            x, y = rng.uniform(0, 0.8), rng.uniform(0, 0.9)
            match = DEFAULT_LOCUS.nearest(x, y)
            distances = [math.hypot(x - s.x, y - s.y) for s in SPECTRAL_LOCUS]
            assert match.distance <= min(distances) + 1e-15
            assert abs(match.distance - math.hypot(x - match.sample.x, y - match.sample.y)) < 1e-15

    def test_exact_sample_coordinates(self):
        """Querying a sample coordinate returns distance 0 and the first sample with that coordinate."""
        first_with_coordinate = {}
        for s in SPECTRAL_LOCUS:
            first_with_coordinate.setdefault(s.coordinate, s.wavelength)
        for s in SPECTRAL_LOCUS:
            match = DEFAULT_LOCUS.nearest(s.x, s.y)
            assert match.distance == 0.0
            assert match.wavelength == first_with_coordinate[s.coordinate]

    def test_tie_resolves_to_lowest_wavelength(self):
        """700-780nm share one coordinate; the lowest wavelength wins."""
        assert DEFAULT_LOCUS.nearest(0.7347, 0.2653).wavelength == 700
        assert DEFAULT_LOCUS.nearest(0.76, 0.26).wavelength == 700

    def test_equidistant_samples(self):
        """Two samples at equal distance resolve to the first in table order."""
        locus = SpectralLocus([SpectralLocusSample(450, 0.25, 0.5), SpectralLocusSample(460, 0.75, 0.5)])
        match = locus.nearest(0.5, 0.5)
        assert match.wavelength == 450


class TestFromCMFS:
    """Test building a locus from the CIE 1931 colour matching functions."""

    def test_shape_and_order(self):
        """Same sampling as the fixed table."""
        locus = SpectralLocus.from_cmfs(380, 780, 5)
        assert len(locus) == 81
        assert list(locus.wavelengths) == list(range(380, 781, 5))

    def test_close_to_fixed_table_in_the_green(self):
        """The CMFS locus agrees with the fixed approximation where the latter is accurate."""
        locus = SpectralLocus.from_cmfs(380, 780, 5)
        by_wl = {s.wavelength: s for s in locus}
        assert np.allclose(by_wl[520].coordinate, (0.0743, 0.8338), atol=0.01)
        assert np.allclose(by_wl[550].coordinate, (0.3016, 0.6923), atol=0.01)
