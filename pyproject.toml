[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballspectrum"
version = "0.1.0"
description = "A brick-breaking ball game with a small FFT and PCM wave toolkit for spectrum plotting"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "breakout", "fft", "spectrum", "audio", "pcm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ballspectrum = "ballspectrum.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ballspectrum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
