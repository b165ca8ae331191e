[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tonecore"
version = "0.1.0"
description = "Musical time, pitch and audio source building blocks for sound synthesis"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "synthesis", "oscillator", "lfo", "noise", "granular", "music", "tempo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tonecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
