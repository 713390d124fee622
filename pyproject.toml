[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninetools"
version = "0.1.0"
description = "Bitcoin rate lookup, a Reverse Polish Notation calculator and Ford-Johnson merge-insertion sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "exchange-rate", "rpn", "calculator", "ford-johnson", "merge-insertion", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btc = "ninetools.bitcoin:main"
rpn = "ninetools.rpn:main"
pmergeme = "ninetools.pmerge_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ninetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
