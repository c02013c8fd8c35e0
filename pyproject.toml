[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wayguide"
version = "0.1.0"
description = "Haptic proximity guidance: motor feedback logic, a framed proximity protocol and a serial-to-WebSocket relay"
requires-python = ">=3.10"
keywords = ["haptics", "proximity", "guidance", "serial", "websocket", "assistive"]
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
    "Topic :: Adaptive Technologies",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]
dependencies = [
    "pyserial",
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wayguide-bridge = "wayguide.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wayguide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
