[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwkit"
version = "0.1.0"
description = "Middleware-layer building blocks: name validation, durations, QoS profiles, message metadata and event statuses"
requires-python = ">=3.10"
dependencies = []
keywords = ["middleware", "robotics", "qos", "topic", "validation", "pubsub"]
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
packages = ["rmwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
