# sonalyze

Tools for working with sampled audio and finding out which frequencies it holds.

## What is inside

- `sonalyze.buffers`: `InterleavedAudioBuffer` holds multi-channel samples
  interleaved, frame after frame. You can iterate it as `AudioFrame`s, which are
  views that write through to the buffer. It can also `concat`, `extend`, mix
  down to mono with `to_mono`, and copy a mono signal onto several channels with
  `multiply`.
- `sonalyze.samples`: `NOfSamples` ties a sample count to a sample rate and
  converts it to and from `datetime.timedelta`. `duration_to_n_of_samples` and
  `n_of_samples_to_duration` do the same conversions on plain integers, at
  microsecond precision.
- `sonalyze.frequency_bin`: `FrequencyBin` and the functions
  `dft_frequency_interval`, `n_of_frequency_bins`, `bin_idx_to_frequency`,
  `frequency_to_bin_idx`, `frequency_interval`, `frequency_gap` and
  `all_frequency_bins` map DFT bins to frequencies and back.
- `sonalyze.harmonic`: `Harmonic` pairs a complex phasor with a frequency bin.
  It gives the `phase()`, `amplitude()` and `power()` of that bin.
- `sonalyze.dft`: `StftAnalyzer` computes every bin from 0 Hz up to the Nyquist
  frequency with an FFT. `GoertzelAnalyzer` computes only the bins you ask for.
  Both apply a windowing function and scale the result by `1 / sqrt(samples)`.
  Both return a list of `Harmonic`s sorted by bin. A signal of the wrong length
  raises `ValueError`.
- `sonalyze.windowing`: `HannWindow`, `RectangleWindow(rect_width)` and
  `IdentityWindow`, all built on the abstract `WindowingFn`.
- `sonalyze.signal`: `frequencies_to_samples` builds a mono sum of cosines,
  normalised to a peak of 1.
- `sonalyze.streams`: the error and state types for audio streams.
  `AudioStreamError` and `AudioStreamBuilderError` each carry a `Kind` enum.
  There are also `IOMode`, `AudioStreamSamplingState`, and `sampling_state`,
  which turns a `DaemonState` into a sampling state.
- `sonalyze.daemon`: `ResourceDaemon` creates a resource on a background thread
  and holds it until it is asked to quit. You can ask it through `quit`,
  `close`, the context manager, or a `QuitSignal` handed to the provider. Its
  state is a `DaemonState` with a `DaemonPhase`.
- Smaller helpers:
  - `sonalyze.moving_average.MovingAverage`
  - `sonalyze.stats.SeriesStatistics`, which raises `StatisticsError` on an
    empty series
  - `sonalyze.discrete_interval.DiscreteInterval`
  - `sonalyze.mapping`: `map_range`, `map_ratio` and their clamped forms
  - `sonalyze.numeric`: rounding, truncation and averaging
  - `sonalyze.bits`: `next_pow_of_2`, `is_even` and `is_odd`
  - `sonalyze.locking`: `with_lock` and `try_with_lock`

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from sonalyze.dft import StftAnalyzer, GoertzelAnalyzer
from sonalyze.frequency_bin import FrequencyBin
from sonalyze.signal import frequencies_to_samples
from sonalyze.windowing import HannWindow

SAMPLE_RATE = 44100
SAMPLES = 4410

signal = frequencies_to_samples(SAMPLE_RATE, SAMPLES, [440.0], 0.0).as_mono()

stft = StftAnalyzer(SAMPLE_RATE, SAMPLES, HannWindow())
peak = max(stft.analyze(signal), key=lambda h: h.power())
print(peak.bin_idx(), peak.frequency(), peak.phase())

bin_ = FrequencyBin.from_frequency(SAMPLE_RATE, SAMPLES, 440.0)
goertzel = GoertzelAnalyzer(SAMPLE_RATE, SAMPLES, [bin_ - 1, bin_, bin_ + 1], HannWindow())
print(max(goertzel.analyze(signal), key=lambda h: h.power()).frequency())
```

Bin 0 is centred at 0 Hz. The last bin (`samples // 2`) is centred at the
Nyquist frequency. `n_of_frequency_bins(samples)` gives the number of bins.

## What it does not do

This package does not open audio devices. It does not record from a microphone,
play sound back, or run a live oscillator. All of its work is on samples you
already hold in memory. The types in `sonalyze.streams` only describe stream
errors and sampling states; nothing in the package produces a live stream. The
package provides no command-line program.