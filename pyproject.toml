[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dexroutes"
version = "0.1.0"
description = "Swap routing, smart route selection and reward distribution logic for an automated market maker exchange"
requires-python = ">=3.10"
dependencies = []
keywords = ["dex", "swap", "router", "amm", "liquidity", "rewards", "staking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dexroutes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
