[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubkit"
version = "0.1.0"
description = "Small building blocks: status codes, bit helpers, intrusive rings, slot and message allocators, transactional data, a thread-pool executor and pattern helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "ring", "transaction", "executor", "bits", "singleton", "role"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubkit"]

[tool.pytest.ini_options]
addopts = "-ra"
