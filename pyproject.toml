[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hlsdsp"
version = "0.1.0"
description = "Bit-accurate models of small fixed-point DSP hardware blocks: FIR, DDS, digital up-converter, windowing and real FFT"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dsp",
    "fixed-point",
    "fir",
    "dds",
    "digital-up-converter",
    "fft",
    "hls",
    "fpga",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hlsdsp-fir = "hlsdsp.fir:main"
hlsdsp-duc = "hlsdsp.duc:main"
hlsdsp-spectrum = "hlsdsp.spectrum:main"

[tool.hatch.build.targets.wheel]
packages = ["hlsdsp"]

[tool.hatch.build.targets.sdist]
include = ["hlsdsp", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
