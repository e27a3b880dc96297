[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernprims"
version = "0.1.0"
description = "Kernel-style primitives: ring buffer indexes, intrusive circular lists, buffered channels, locks and message queues"
requires-python = ">=3.10"
dependencies = []
keywords = ["ringbuffer", "linked-list", "channel", "mutex", "message-queue", "embedded", "rtos"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kernprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
