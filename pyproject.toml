[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "incidentlog"
version = "1.0.0"
description = "Terminal incident reporting: record, view, filter, edit, delete and sort incident reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["incident", "reporting", "terminal", "log", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
incidentlog-report = "incidentlog.main1:main"
incidentlog-manage = "incidentlog.main2:main"

[tool.hatch.build.targets.wheel]
packages = ["incidentlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
