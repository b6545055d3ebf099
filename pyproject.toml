[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parbench"
version = "0.1.0"
description = "Sequential and threaded k-means clustering benchmarks, with fixed image kernels and a CPU convolution"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["k-means", "clustering", "benchmark", "threads", "convolution", "image-kernels"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
parbench = "parbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parbench"]

[tool.pytest.ini_options]
addopts = "-ra"
