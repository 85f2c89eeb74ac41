[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "hostalcli"
version = "0.1.0"
description = "Interactive console application for managing hostels, rooms, reservations, stays and reviews"
requires-python = ">=3.10"
dependencies = []
keywords = ["hostel", "reservations", "booking", "console", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
hostalcli = "hostalcli.menu:main"

[tool.setuptools.packages.find]
include = ["hostalcli*"]

[tool.pytest.ini_options]
addopts = "-ra"
