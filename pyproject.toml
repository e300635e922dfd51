[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "naviz"
version = "0.4.1"
description = "Data model, colours, layout and viewer state for neutral-atom quantum computer visualizations"
requires-python = ">=3.10"
keywords = ["naviz", "neutral atoms", "quantum computing", "visualization", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["naviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
