[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linearkit"
version = "0.1.0"
description = "Array exercises, classic sorts and searches, and small linear data structures: a fixed stack, a linear queue and linked lists."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "arrays",
    "sorting",
    "searching",
    "stack",
    "queue",
    "linked list",
    "data structures",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
linearkit-stack = "linearkit.stack:main"
linearkit-queue = "linearkit.queues:main"

[tool.hatch.build.targets.wheel]
packages = ["linearkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
