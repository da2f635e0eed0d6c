[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "realmcore"
version = "0.1.0"
description = "Building blocks for a small online role-playing game server: geometry and collision, network buffers and asyncio sessions, packet framing, game data tables and a database connection pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-server", "rpg", "collision", "networking", "asyncio", "packets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["realmcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
