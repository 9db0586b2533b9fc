[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chegopy"
version = "0.1.0"
description = "Chess rules library: bitboard move generation, FEN handling, UCI move notation, game state and perft"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "fen", "uci", "perft", "move-generation", "zobrist"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chegopy-perft = "chegopy.perft:main"

[tool.hatch.build.targets.wheel]
packages = ["chegopy"]

[tool.pytest.ini_options]
addopts = "-ra"
