[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atribot"
version = "0.1.0"
description = "Chat bot configuration, command line and standalone chat features"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["chat", "bot", "onebot", "plugins", "gacha", "drift bottle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
atribot = "atribot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["atribot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
