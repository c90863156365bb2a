[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketdesk"
version = "0.1.0"
description = "A console technical-support ticket desk with simple linked-list, heap, map, set, queue and stack containers."
requires-python = ">=3.10"
dependencies = []
keywords = ["support", "tickets", "console", "linked list", "heap", "map", "set", "queue", "stack"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ticketdesk = "ticketdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ticketdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
