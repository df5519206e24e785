import math

import pytest

from sonalyze.signal import frequencies_to_samples

F32_EPSILON = 1.1920929e-07


def test_frequencies_to_samples():
    samples = frequencies_to_samples(44100, 100, [440.0], 0.0)
    assert abs(samples.as_mono()[0] - 1.0) < F32_EPSILON
    assert abs(samples.as_mono()[1] - 1.0) > F32_EPSILON


def test_shape_and_rate():
    signal = frequencies_to_samples(44100, 250, [440.0, 333.0], 0.0)
    assert len(signal) == 250
    assert signal.n_of_channels == 1
    assert signal.sample_rate == 44100


def test_normalised_to_unit_peak():
    signal = frequencies_to_samples(44100, 1000, [440.0, 333.0, 1000.0], 0.3)
    assert max(abs(s) for s in signal.as_mono()) == pytest.approx(1.0)


def test_phase_shift():
    signal = frequencies_to_samples(44100, 10, [440.0], math.pi / 2)
    first = signal.as_mono()[0]
    assert abs(first) < 0.1


def test_empty_signal():
    assert len(frequencies_to_samples(44100, 0, [440.0], 0.0)) == 0


def test_silent_signal_stays_zero():
    signal = frequencies_to_samples(44100, 5, [], 0.0)
    assert signal.as_mono() == [0.0] * 5


def test_invalid_sample_rate():
    with pytest.raises(ValueError):
        frequencies_to_samples(0, 10, [440.0], 0.0)