[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodecheck"
version = "0.1.0"
description = "Helpers for gating and running Starknet JSON-RPC node conformance tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["starknet", "json-rpc", "testing", "node", "conformance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodecheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
