[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "panelkit"
version = "0.1.0"
description = "Parsers, system readers and text rendering for status bar modules: CPU, memory, MPRIS, Hyprland, gamemode, custom scripts and more."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = [
    "status-bar",
    "panel",
    "hyprland",
    "mpris",
    "wayland",
    "applet",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["panelkit"]

[tool.hatch.build.targets.sdist]
include = [
    "panelkit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
