[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latte"
version = "0.1.0"
description = "Core pieces of a small account-based blockchain: hashing, addresses, Ed25519 signatures, transactions, world state and a stack-based script VM."
requires-python = ">=3.10"
keywords = ["blockchain", "virtual-machine", "bytecode", "interpreter", "ed25519", "blake3", "transactions"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
latte = "latte.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["latte"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
