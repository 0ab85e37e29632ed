[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadigest"
version = "0.1.0"
description = "SHA-256, SHA-384 and SHA-512 message digests in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "sha384", "sha512", "hash", "digest", "sha-2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
shadigest = "shadigest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shadigest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
