import math
import random

import pytest

from sonalyze.dft import GoertzelAnalyzer, StftAnalyzer
from sonalyze.frequency_bin import FrequencyBin, all_frequency_bins
from sonalyze.mapping import map_ratio
from sonalyze.signal import frequencies_to_samples
from sonalyze.windowing import HannWindow, IdentityWindow


def _peak(analysis):
    return max(analysis, key=lambda harmonic: harmonic.power())


@pytest.mark.parametrize("i", range(1, 100, 7))
def test_goertzel_peaks_at_frequency_bin(i):
    sample_rate, samples = 44100, 4410
    bin_ = FrequencyBin(sample_rate, samples, 50)
    analyzer = GoertzelAnalyzer(
        sample_rate, samples, [bin_ - 2, bin_ - 1, bin_, bin_ + 1, bin_ + 2], HannWindow()
    )
    frequency = map_ratio(i / 100, bin_.frequency_interval())
    signal = frequencies_to_samples(sample_rate, samples, [frequency], 0.0)
    peak = _peak(analyzer.analyze(signal.as_mono()))
    assert peak.frequency() == pytest.approx(bin_.frequency(), abs=1e-6)


def test_goertzel_phase():
    sample_rate, samples = 44100, 4410
    bin_ = FrequencyBin(sample_rate, samples, 50)
    analyzer = GoertzelAnalyzer(
        sample_rate, samples, [bin_ - 2, bin_ - 1, bin_, bin_ + 1, bin_ + 2], HannWindow()
    )
    signal = frequencies_to_samples(sample_rate, samples, [bin_.frequency()], 0.0)
    phase = _peak(analyzer.analyze(signal.as_mono())).phase()
    assert abs(phase) < 0.001


def test_goertzel_peaks_at_frequency_bin_440():
    sample_rate, samples = 44100, 100
    bin_ = FrequencyBin.from_frequency(sample_rate, samples, 441.0)
    assert bin_.bin_idx == 1
    analyzer = GoertzelAnalyzer(sample_rate, samples, [bin_, bin_ + 1, bin_ + 2], HannWindow())
    signal = frequencies_to_samples(sample_rate, samples, [440.0], 0.0)
    harmonic = _peak(analyzer.analyze(signal.as_mono()))
    assert harmonic.bin_idx() == 1
    assert abs(harmonic.phase()) < 0.01


def test_goertzel_sorts_bins_and_accepts_indices():
    analyzer = GoertzelAnalyzer(44_100, 64, [5, 2, 4, 3], HannWindow())
    analysis = analyzer.analyze([0.0] * 64)
    assert [harmonic.bin_idx() for harmonic in analysis] == [2, 3, 4, 5]
    assert all(harmonic.power() == 0.0 for harmonic in analysis)


def test_goertzel_rejects_wrong_length():
    analyzer = GoertzelAnalyzer(44_100, 64, [2, 3], HannWindow())
    with pytest.raises(ValueError):
        analyzer.analyze([0.0] * 63)


def test_goertzel_rejects_mismatched_bin():
    with pytest.raises(ValueError):
        GoertzelAnalyzer(44_100, 64, [FrequencyBin(48_000, 64, 2)], HannWindow())


@pytest.mark.parametrize("i", range(1, 100, 7))
def test_stft_peaks_at_frequency_bin(i):
    sample_rate, samples = 44100, 44100
    analyzer = StftAnalyzer(sample_rate, samples)
    bins = all_frequency_bins(sample_rate, samples)
    delta_hz = bins[1].frequency() - bins[0].frequency()
    target = bins[10].frequency()
    frequency = map_ratio(i / 100, (target - delta_hz / 2, target + delta_hz / 2))
    signal = frequencies_to_samples(sample_rate, samples, [frequency], 0.0)
    peak = _peak(analyzer.analyze(signal.as_mono()))
    assert peak.frequency() == pytest.approx(target, abs=1e-6)


def test_stft_peaks_at_frequency_bin_440():
    sample_rate, samples = 44100, 100
    analyzer = StftAnalyzer(sample_rate, samples)
    signal = frequencies_to_samples(sample_rate, samples, [440.0], 0.0)
    harmonic = _peak(analyzer.analyze(signal.as_mono())[1:])
    assert harmonic.bin_idx() == 1
    assert abs(harmonic.phase()) < 0.01


def test_stft_phase():
    sample_rate, samples = 44100, 4410
    bin_ = FrequencyBin(sample_rate, samples, 50)
    analyzer = StftAnalyzer(sample_rate, samples)
    signal = frequencies_to_samples(sample_rate, samples, [bin_.frequency()], 0.0)
    phase = _peak(analyzer.analyze(signal.as_mono())).phase()
    assert abs(phase) < 0.001


def test_stft_returns_bins_up_to_nyquist_in_order():
    analyzer = StftAnalyzer(44_100, 64, HannWindow())
    analysis = analyzer.analyze([random.uniform(-1.0, 1.0) for _ in range(64)])
    assert [harmonic.bin_idx() for harmonic in analysis] == list(range(33))


def test_stft_default_window_is_hann():
    signal = [random.uniform(-1.0, 1.0) for _ in range(64)]
    default = StftAnalyzer(44_100, 64).analyze(signal)
    explicit = StftAnalyzer(44_100, 64, HannWindow()).analyze(signal)
    assert [h.phasor for h in default] == [h.phasor for h in explicit]


def test_stft_rejects_wrong_length():
    analyzer = StftAnalyzer(44_100, 64)
    with pytest.raises(ValueError):
        analyzer.analyze([0.0] * 65)


def test_stft_identity_window_dc_component():
    analyzer = StftAnalyzer(8, 4, IdentityWindow())
    analysis = analyzer.analyze([1.0, 1.0, 1.0, 1.0])
    assert analysis[0].phasor == pytest.approx(complex(2.0, 0.0))
    assert analysis[1].amplitude() == pytest.approx(0.0, abs=1e-12)
    assert analysis[2].amplitude() == pytest.approx(0.0, abs=1e-12)


def test_goertzel_and_stft_agree_on_random_signal():
    signal = [random.uniform(-1.0, 1.0) for _ in range(64)]
    stft = StftAnalyzer(44_100, 64, HannWindow()).analyze(signal)
    goertzel = GoertzelAnalyzer(44_100, 64, [2, 3, 4, 5], HannWindow()).analyze(signal)
    for harmonic in goertzel:
        expected = stft[harmonic.bin_idx()].phasor
        assert harmonic.phasor == pytest.approx(expected, abs=1e-9)


def test_cross_check_goertzel_and_stft():
    sample_rate, samples = 44100, 44100
    frequency = 440.0
    frequency_bin = FrequencyBin.from_frequency(sample_rate, samples, frequency)
    signal = frequencies_to_samples(sample_rate, samples, [frequency], 0.0).as_mono()
    goertzel = GoertzelAnalyzer(
        sample_rate,
        samples,
        [
            frequency_bin - 20,
            frequency_bin - 15,
            frequency_bin - 10,
            frequency_bin - 5,
            frequency_bin,
            frequency_bin + 5,
            frequency_bin + 10,
            frequency_bin + 15,
            frequency_bin + 20,
        ],
        HannWindow(),
    )
    stft = StftAnalyzer(sample_rate, samples, HannWindow())

    stft_result = _peak(stft.analyze(signal))
    goertzel_result = _peak(goertzel.analyze(signal))

    assert stft_result.bin_idx() == goertzel_result.bin_idx()
    assert abs(stft_result.amplitude() - goertzel_result.amplitude()) < 0.01
    assert abs(stft_result.phase() - goertzel_result.phase()) < math.tau / 100