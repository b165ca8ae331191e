# tonecore

Building blocks for sound synthesis. The package provides:

- typed musical time and pitch values,
- parsing of time notation and pitch strings,
- a sorted event timeline,
- audio sources: oscillator, noise, LFO, sample player and granular player.

It is written in pure Python and has no runtime dependencies.

## Install

```
pip install tonecore
```

## Time and pitch values

`tonecore.time.value` has small frozen value types: `Seconds`, `Hertz`,
`MidiNote`, `Ticks`, `Samples`, `Beats` and `Bpm`.

```python
from tonecore.time.value import Bpm, Hertz, MidiNote, Seconds

Bpm(120.0).quarter_duration()     # Seconds(0.5)
MidiNote(69).to_hz()              # Hertz(440.0)
Hertz(261.63).to_midi()           # MidiNote(60)
Hertz(440.0).harmonize([0, 4, 7]) # a major triad
MidiNote(120).transpose(10)       # MidiNote(127), clamped
Seconds(1.0) + Seconds(0.5)       # Seconds(1.5)
str(Hertz(440.0))                 # "440hz"
```

It also has `db_to_gain`, `gain_to_db`, `equal_power_scale` and
`interval_to_freq_ratio`.

## Time notation

```python
from tonecore.time.notation import parse_time
from tonecore.time.frequency import note_to_frequency, note_to_midi

parse_time("4n", 120.0)      # 0.5 seconds: a quarter note at 120 BPM
parse_time("1:2:1", 120.0)   # bars:beats:sixteenths in 4/4
parse_time("2hz", 120.0)     # 0.5 seconds: the period of 2 Hz

note_to_frequency("A4")      # 440.0
note_to_midi("C4")           # 60
```

Invalid input raises `TimeParseError` or `NoteParseError`, both
subclasses of `ValueError`.

For finer control, parse an expression once and resolve it against a
`TimeContext`, which supplies tempo, sample rate, ticks per quarter, the
current position and the time signature. `StaticTimeContext` is a fixed
one (120 BPM, 44100 Hz, 192 ticks per quarter, now at zero, 4/4 by default):

```python
from tonecore.time.context import StaticTimeContext
from tonecore.time.expr import parse_time_expr, parse_pitch
from tonecore.time.value import Bpm, Seconds

ctx = StaticTimeContext(Bpm(120.0), 44_100.0, 192, Seconds(0.3))
parse_time_expr("@4n").to_seconds(ctx)   # quantised to the next quarter: Seconds(0.5)
parse_time_expr("+8n").to_seconds(ctx)   # now + an eighth note
parse_pitch("Bb3").to_hz()
parse_pitch("69midi").to_midi()          # MidiNote(69)
```

Time notation understood: plain seconds (`1.5`, `2.5s`), note values
(`4n`, `8t`, `4n.`), bars:beats:sixteenths (`1:2:3`, `1:2`), frequency
periods (`2hz`), ticks (`480i`), samples (`44100samples`), now-relative
(`+4n`) and quantised (`@4n`). Pitches may be frequencies (`440`,
`440hz`), MIDI numbers (`69midi`) or note names in octaves 0-9 (`C4`,
`A#3`, `Bb5`). Errors raise `TimeError` or `PitchError`.

## Timeline

`tonecore.util.timeline.Timeline` keeps events sorted by time, read from
each event's `time` attribute unless another `key` is given. Events at the
same time keep their insertion order.

```python
from dataclasses import dataclass
from tonecore.util.timeline import Timeline

@dataclass
class Event:
    time: float
    value: float

tl = Timeline()
for t in (1.0, 3.0, 2.0):
    tl.add(Event(t, t * 10))

tl.get(2.5).value         # 20.0: last event at or before 2.5
tl.get_after(2.0).value   # 30.0: first event strictly after 2.0
tl.get_before(2.0).value  # 10.0: last event strictly before 2.0
tl.cancel_from(2.0)       # drops events at or after 2.0
len(tl)                   # 1
```

## Sources

Every source has a `process(frames, sample_rate)` method returning a list
of `frames` float samples, keeping its state between calls.

```python
from tonecore.source.oscillator import Oscillator, OscillatorType
from tonecore.source.lfo import Lfo
from tonecore.source.noise import Noise, NoiseType

osc = Oscillator(OscillatorType.SINE, 440.0)
block = osc.process(512, 44_100)

lfo = Lfo(OscillatorType.SINE, 2.0, 200.0, 2000.0)
lfo.amplitude = 0.5
lfo.start()
cutoffs = lfo.process(512, 44_100)

pink = Noise(NoiseType.PINK).process(512, 44_100)
```

The oscillator shapes are sine, square, sawtooth and triangle. Noise is
white, pink or brown, from a fixed-seed generator, so its output is
repeatable. A stopped LFO holds the value at its `phase_offset`.

Sample playback reads 8 to 32-bit PCM or 32-bit float WAV data into an
`AudioBuffer`, keeping only the first channel:

```python
from tonecore.source.player import AudioBuffer, Player
from tonecore.source.grain_player import GrainPlayer

with open("loop.wav", "rb") as fh:
    buffer = AudioBuffer.from_wav(fh.read())

player = Player(buffer)
player.loop = True
player.playback_rate = 1.5
player.start()
out = player.process(1024, 48_000)

grains = GrainPlayer(buffer, 48_000)
grains.playback_rate = 0.5
grains.start_at(0.5)
out = grains.process(1024, 48_000)
grains.position_seconds()
```

Both players compensate for a buffer sample rate that differs from the
output rate. `GrainPlayer` changes tempo without changing pitch by reading
Hann-windowed, overlapping grains; `grain_size` and `overlap` tune it.
Undecodable data raises `WavDecodeError`.

## What it does not do

The package only computes samples. It does not open an audio device or play
sound, has no audio graph for connecting sources to one another, and has
no effects, envelopes, instruments or transport scheduler. Feed the lists
that `process` returns to whatever output or file writer you use.

## Tests

```
pip install tonecore[test]
pytest
```