[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightciphers"
version = "0.1.0"
description = "Pure Python reference implementations of lightweight block ciphers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "block cipher",
    "lightweight",
    "ktantan",
    "led",
    "mibs",
    "piccolo",
    "sea",
    "simon",
    "speck",
    "skipjack",
]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["lightciphers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
