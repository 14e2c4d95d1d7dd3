[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "appattest"
version = "0.1.0"
description = "Server-side validation of Apple App Attest assertions"
requires-python = ">=3.10"
keywords = ["app attest", "assertion", "ecdsa", "p-256", "cbor", "ios", "device integrity"]
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
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cbor2",
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["appattest"]

[tool.pytest.ini_options]
addopts = "-ra"
