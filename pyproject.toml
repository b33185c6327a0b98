[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osim"
version = "0.1.0"
description = "Small operating-system concept simulations: page replacement, CPU scheduling, shared memory with a pipe, and threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["operating systems", "scheduling", "paging", "fifo", "lru", "round robin", "shared memory", "threads", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osim-paging = "osim.paging:main"
osim-scheduler = "osim.scheduler:main"
osim-shm-pipe = "osim.shared_memory_pipe:main"
osim-threads = "osim.threads:main"

[tool.hatch.build.targets.wheel]
packages = ["osim"]

[tool.pytest.ini_options]
addopts = "-ra"
