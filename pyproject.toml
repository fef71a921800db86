[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swissgrid"
version = "0.2.0"
description = "Conversion between the Swiss coordinate systems (LV03/CH1903 and LV95/CH1903+) and WGS84"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["coordinates", "switzerland", "swiss", "navigation", "wgs84", "lv03", "lv95"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
swissgrid-errormap = "swissgrid.errormap:main"

[tool.hatch.build.targets.wheel]
packages = ["swissgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
