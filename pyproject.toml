[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "debtoolkit"
version = "0.1.0"
description = "Read and unpack Debian binary packages, plus small display-free widget models"
requires-python = ">=3.10"
dependencies = []
keywords = ["deb", "debian", "ar", "archive", "package", "extract"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Packaging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
debtoolkit-extract = "debtoolkit.deb:main"

[tool.hatch.build.targets.wheel]
packages = ["debtoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
