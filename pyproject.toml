[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitools"
version = "0.1.0"
description = "Small command-line tools: a bitcoin wallet evaluator, an RPN calculator and a Ford-Johnson sorter"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "merge-insertion", "ford-johnson", "sorting", "bitcoin", "csv"]
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
btc = "minitools.exchange:main"
rpn = "minitools.rpn:main"
pmergeme = "minitools.pmerge:main"

[tool.hatch.build.targets.wheel]
packages = ["minitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
