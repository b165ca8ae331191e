import math

import pytest

from tonecore.source.grain_player import GrainPlayer
from tonecore.source.player import AudioBuffer


def _sine_buffer(sample_rate=44100):
    data = [math.sin(2.0 * math.pi * 440.0 * i / sample_rate) for i in range(sample_rate)]
    return AudioBuffer.from_samples(data, sample_rate)


def _peak(samples):
    return max(abs(s) for s in samples)


def test_produces_output():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.start()
    out = gp.process(4096, 44100)
    assert len(out) == 4096
    assert _peak(out) > 0.1


def test_half_speed():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.playback_rate = 0.5
    gp.start()
    assert _peak(gp.process(8192, 44100)) > 0.1


def test_double_speed():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.playback_rate = 2.0
    gp.start()
    assert _peak(gp.process(4096, 44100)) > 0.1


def test_position():
    gp = GrainPlayer(_sine_buffer(), 44100)
    assert gp.position_seconds() == 0.0
    gp.start()
    gp.process(4410, 44100)
    assert abs(gp.position_seconds() - 0.1) < 0.001


def test_start_at_offset():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.start_at(0.5)
    assert abs(gp.position_seconds() - 0.5) < 0.001
    gp.process(4410, 44100)
    assert abs(gp.position_seconds() - 0.6) < 0.001


def test_sample_rate_mismatch():
    gp = GrainPlayer(_sine_buffer(), 48000)
    gp.start_at(0.5)
    assert abs(gp.position_seconds() - 0.5) < 0.001
    gp.process(4800, 48000)
    assert abs(gp.position_seconds() - 0.6) < 0.01


def test_not_started_is_silent():
    gp = GrainPlayer(_sine_buffer(), 44100)
    assert gp.process(128, 44100) == [0.0] * 128


def test_empty_buffer_is_silent():
    gp = GrainPlayer(AudioBuffer.from_samples([], 44100), 44100)
    gp.start()
    assert gp.process(16, 44100) == [0.0] * 16


def test_first_sample_is_window_start():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.start()
    out = gp.process(4, 44100)
    assert out[0] == 0.0


def test_duration():
    gp = GrainPlayer(_sine_buffer(), 44100)
    assert gp.duration() == pytest.approx(1.0)


def test_loop_wraps_position():
    buf = AudioBuffer.from_samples([0.5] * 1000, 1000)
    gp = GrainPlayer(buf, 1000)
    gp.start()
    gp.process(1500, 1000)
    assert gp.playing
    assert gp.position_seconds() == pytest.approx(0.5)


def test_without_loop_stops_at_end():
    buf = AudioBuffer.from_samples([0.5] * 1000, 1000)
    gp = GrainPlayer(buf, 1000)
    gp.loop = False
    gp.start()
    gp.process(1200, 1000)
    assert gp.playing is False
    assert gp.process(10, 1000) == [0.0] * 10


def test_stop_silences_output():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.start()
    gp.process(1000, 44100)
    gp.stop()
    assert gp.playing is False
    assert gp.process(64, 44100) == [0.0] * 64


def test_parameter_clamping():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.grain_size = 0.001
    assert gp.grain_size == 0.01
    gp.overlap = 0.0
    assert gp.overlap == 0.1
    gp.overlap = 1.0
    assert gp.overlap == 0.9
    gp.playback_rate = 0.0
    assert gp.playback_rate == 0.1


def test_output_bounded_by_overlap():
    gp = GrainPlayer(_sine_buffer(), 44100)
    gp.start()
    out = gp.process(8820, 44100)
    # With 50% overlap at most two Hann windows sum, which stays within 1.0.
    assert _peak(out) <= 1.0 + 1e-9