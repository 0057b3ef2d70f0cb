[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlerack"
version = "0.1.0"
description = "Solvers for classic programming-contest puzzles, most with two interchangeable approaches and a stdin/stdout command each."
requires-python = ">=3.10"
keywords = ["algorithms", "puzzles", "graphs", "greedy", "kmp", "josephus", "hanoi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
another-game = "puzzlerack.another_game:main"
counting-rooms = "puzzlerack.counting_rooms:main"
finding-borders = "puzzlerack.finding_borders:main"
hanoi = "puzzlerack.hanoi:main"
increasing-array = "puzzlerack.increasing_array:main"
josephus = "puzzlerack.josephus:main"
movie-festival = "puzzlerack.movie_festival:main"
room-allocation = "puzzlerack.room_allocation:main"
subordinates = "puzzlerack.subordinates:main"
two-sets = "puzzlerack.two_sets:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlerack"]

[tool.pytest.ini_options]
addopts = "-ra"
