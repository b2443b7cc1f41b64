[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bhy2sense"
version = "0.1.0"
description = "Decode sensor data packets and FIFO frames from BHI260/BHA260 smart sensor hubs"
requires-python = ">=3.10"
keywords = ["sensor", "bhi260", "bha260", "imu", "bsec", "fifo", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bhy2sense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
