[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sonalyze"
version = "0.1.0"
description = "Audio buffers, frequency bins, windowing functions and DFT analyzers (STFT and Goertzel), with small numeric helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["audio", "dft", "fft", "goertzel", "stft", "signal", "frequency", "windowing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sonalyze"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
