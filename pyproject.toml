[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recordmsg"
version = "0.1.0"
description = "Core of a small multi-platform chat client: a Discord adaptor, a stored login list and page state"
requires-python = ">=3.10"
keywords = ["chat", "discord", "messenger", "client"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
recordmsg = "recordmsg.app:main"

[tool.hatch.build.targets.wheel]
packages = ["recordmsg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
