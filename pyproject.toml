[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hantekproto"
version = "0.1.0"
description = "Builders and parsers for the USB bulk and control commands of Hantek digital oscilloscopes"
requires-python = ">=3.10"
dependencies = []
keywords = ["hantek", "oscilloscope", "usb", "protocol", "dso"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Instrument Drivers",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["hantekproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
