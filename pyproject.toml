[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "klinechart"
version = "0.1.0"
description = "Candlestick and volume chart models, market data events and backtesting interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["kline", "candlestick", "volume", "backtesting", "futures", "trading"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["klinechart"]

[tool.pytest.ini_options]
addopts = "-ra"
