[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printmarquee"
version = "0.1.0"
description = "Compact and pretty JSON writing, a bounded scratch buffer, character readers and a clock synced from an HTTP Date header"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "serializer", "pretty-print", "clock", "http-date", "marquee"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["printmarquee"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
