[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ingotkit"
version = "0.1.0"
description = "Small general-purpose building blocks: delayed and dynamic values, id recycling, late initialisation, primes, reactive values and AVL tree maps and sets."
requires-python = ">=3.10"
dependencies = []
keywords = ["reactive", "avl", "tree-map", "tree-set", "id-manager", "primes", "utilities"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ingotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
