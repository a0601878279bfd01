[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wodlib"
version = "0.1.0"
description = "Small utilities: string and line handling, paragraph splitting, integer arithmetic, binary search, subprocess helpers and asyncio streams"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "strings",
    "paragraphs",
    "newlines",
    "gcd",
    "binary-search",
    "subprocess",
    "asyncio",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["wodlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.mypy]
python_version = "3.10"
strict = true

[tool.ruff]
target-version = "py310"
line-length = 88
