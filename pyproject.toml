[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opnvgm"
version = "0.1.0"
description = "Parse VGM music files and convert YM2612 data into OPN2 register commands and raw write instructions."
requires-python = ">=3.10"
dependencies = []
keywords = ["vgm", "ym2612", "opn2", "chiptune", "sega", "fm-synthesis", "gd3"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Conversion",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["opnvgm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
