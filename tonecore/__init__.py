"""Musical time, pitch, a sorted timeline and audio sources for sound synthesis."""

__version__ = "0.1.0"