[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexusgate"
version = "0.1.0"
description = "LoRa gateway helpers: airtime estimates, downlink schedules, host sign-in, and utility-class page assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["lora", "gateway", "airtime", "http", "css", "utility-classes"]
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
    "Topic :: Communications",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nexusgate"]

[tool.pytest.ini_options]
addopts = "-ra"
