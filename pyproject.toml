[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genaikit"
version = "0.3.5"
description = "Provider-neutral building blocks for chat requests to generative AI services: messages, options, tools, usage, resolvers, JSON web calls and streaming."
requires-python = ">=3.10"
keywords = ["generative-ai", "llm", "chat", "streaming", "tools", "asyncio"]
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

[tool.hatch.build.targets.wheel]
packages = ["genaikit"]

[tool.hatch.build.targets.sdist]
include = ["genaikit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
