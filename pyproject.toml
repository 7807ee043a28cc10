[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rfidgate"
version = "1.0.0"
description = "RFID access control: card validation, sequential relay activation and audio feedback with brute-force back-off"
requires-python = ">=3.10"
dependencies = []
keywords = ["rfid", "nfc", "access control", "relay", "door", "pn532", "jq6500"]
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
    "Topic :: Home Automation",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rfidgate"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
