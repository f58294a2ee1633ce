[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmwcore"
version = "0.1.0"
description = "Middleware data types: QoS policies, durations, return codes, message metadata, network flow endpoints and serialized messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["middleware", "qos", "robotics", "pubsub", "network-flow"]
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
packages = ["rmwcore"]

[tool.pytest.ini_options]
addopts = "-ra"
