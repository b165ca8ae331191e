import math

import pytest

from tonecore.source.oscillator import Oscillator, OscillatorType, sample_waveform


def test_square_values():
    assert sample_waveform(OscillatorType.SQUARE, 0.25) == 1.0
    assert sample_waveform(OscillatorType.SQUARE, 0.75) == -1.0


def test_sawtooth_and_triangle_start_at_minus_one():
    assert sample_waveform(OscillatorType.SAWTOOTH, 0.0) == -1.0
    assert sample_waveform(OscillatorType.TRIANGLE, 0.0) == -1.0
    assert sample_waveform(OscillatorType.TRIANGLE, 0.5) == 1.0


def test_sine_matches_math_sin_quarter():
    assert abs(sample_waveform(OscillatorType.SINE, 0.25) - 1.0) < 1e-12
    assert abs(sample_waveform(OscillatorType.SINE, 0.0)) < 1e-12


@pytest.mark.parametrize("waveform", list(OscillatorType))
def test_waveform_range(waveform):
    for k in range(100):
        value = sample_waveform(waveform, k / 100)
        assert -1.0 <= value <= 1.0


def test_sine_symmetry():
    for k in range(1, 50):
        phase = k / 100
        a = sample_waveform(OscillatorType.SINE, phase)
        b = sample_waveform(OscillatorType.SINE, phase + 0.5)
        assert math.isclose(a, -b, abs_tol=1e-9)


@pytest.mark.parametrize("waveform", list(OscillatorType))
def test_process_length_and_range(waveform):
    osc = Oscillator(waveform, 440.0)
    out = osc.process(256, 44100)
    assert len(out) == 256
    assert all(-1.0 <= s <= 1.0 for s in out)


def test_phase_continuity_across_calls():
    whole = Oscillator(OscillatorType.SINE, 440.0).process(64, 44100)
    split = Oscillator(OscillatorType.SINE, 440.0)
    parts = split.process(32, 44100) + split.process(32, 44100)
    for a, b in zip(whole, parts):
        assert math.isclose(a, b, abs_tol=1e-9)


def test_periodic_output():
    osc = Oscillator(OscillatorType.SAWTOOTH, 100.0)
    out = osc.process(400, 800)
    for a, b in zip(out, out[8:]):
        assert math.isclose(a, b, abs_tol=1e-9)


def test_zero_frequency_is_constant():
    osc = Oscillator(OscillatorType.SAWTOOTH, 0.0)
    out = osc.process(10, 44100)
    assert out == [sample_waveform(OscillatorType.SAWTOOTH, 0.0)] * 10


def test_first_sample_is_phase_zero():
    for waveform in OscillatorType:
        osc = Oscillator(waveform, 440.0)
        assert osc.process(1, 44100)[0] == sample_waveform(waveform, 0.0)


def test_frequency_change_takes_effect():
    osc = Oscillator(OscillatorType.SINE, 440.0)
    osc.frequency = 880.0
    reference = Oscillator(OscillatorType.SINE, 880.0)
    assert osc.process(32, 44100) == reference.process(32, 44100)


def test_square_alternates_halves():
    osc = Oscillator(OscillatorType.SQUARE, 1.0)
    out = osc.process(8, 8)
    assert out[:4] == [1.0] * 4
    assert out[4:] == [-1.0] * 4