[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nibblecipher"
version = "0.1.0"
description = "A small educational byte cipher with ECB and CTR modes, Base64 output and GF(2^4) S-box tooling"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "feistel", "s-box", "galois-field", "ecb", "ctr", "base64", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nibblecipher = "nibblecipher.cli:main"
nibblecipher-sbox = "nibblecipher.galois:main"

[tool.hatch.build.targets.wheel]
packages = ["nibblecipher"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
