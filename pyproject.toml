[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Solvers for a collection of daily programming puzzles from 2022, 2023 and 2024"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solvers", "programming-puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzlebox-2022-01 = "puzzlebox.y2022_day01:main"
puzzlebox-2022-02 = "puzzlebox.y2022_day02:main"
puzzlebox-2022-03 = "puzzlebox.y2022_day03:main"
puzzlebox-2022-04 = "puzzlebox.y2022_day04:main"
puzzlebox-2022-05 = "puzzlebox.y2022_day05:main"
puzzlebox-2022-06 = "puzzlebox.y2022_day06:main"
puzzlebox-2023-01 = "puzzlebox.y2023_day01:main"
puzzlebox-2023-02 = "puzzlebox.y2023_day02:main"
puzzlebox-2023-03 = "puzzlebox.y2023_day03:main"
puzzlebox-2023-04 = "puzzlebox.y2023_day04:main"
puzzlebox-2023-05 = "puzzlebox.y2023_day05:main"
puzzlebox-2023-06 = "puzzlebox.y2023_day06:main"
puzzlebox-2023-07 = "puzzlebox.y2023_day07:main"
puzzlebox-2023-07-jokers = "puzzlebox.y2023_day07_jokers:main"
puzzlebox-2023-08 = "puzzlebox.y2023_day08:main"
puzzlebox-2023-09 = "puzzlebox.y2023_day09:main"
puzzlebox-2023-10 = "puzzlebox.y2023_day10:main"
puzzlebox-2024-01 = "puzzlebox.y2024_day01:main"
puzzlebox-2024-02 = "puzzlebox.y2024_day02:main"
puzzlebox-2024-03 = "puzzlebox.y2024_day03:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

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
