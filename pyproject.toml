[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmlkit"
version = "0.1.0"
description = "KML element types with readers and writers for geometries, styles, links and extended data"
requires-python = ">=3.10"
dependencies = []
keywords = ["kml", "gis", "geospatial", "xml", "placemark", "polygon", "style"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kmlkit"]

[tool.hatch.build.targets.sdist]
include = ["kmlkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
