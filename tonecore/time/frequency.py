"""Conversions between MIDI numbers, note names and frequencies."""

from __future__ import annotations

from tonecore.time.expr import PitchError, parse_pitch
from tonecore.time.value import Hertz, MidiNote


class NoteParseError(ValueError):
    """Raised when a note name cannot be turned into a pitch."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid note: {detail}")
        self.detail = detail


def midi_to_frequency(midi: int) -> float:
    """Frequency in Hz of a MIDI note (A4 = 69 = 440 Hz, 12-TET)."""
    return MidiNote(midi).to_hz().value


def frequency_to_midi(freq: float) -> int:
    """The MIDI note nearest to a frequency in Hz."""
    return Hertz(freq).to_midi().value


def note_to_frequency(note: str) -> float:
    """Frequency in Hz of a note name such as ``"C4"``, ``"A#4"`` or ``"Bb3"``."""
    try:
        return parse_pitch(note).to_hz().value
    except PitchError as exc:
        raise NoteParseError(str(exc)) from exc


def note_to_midi(note: str) -> int:
    """MIDI number of a note name; C4 is 60 and A4 is 69."""
    try:
        return parse_pitch(note).to_midi().value
    except PitchError as exc:
        raise NoteParseError(str(exc)) from exc