[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslab"
version = "0.1.0"
description = "Small systems-programming exercises: an explicit-list heap allocator, matrix loops, binary file formats and small number utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "allocator",
    "malloc",
    "explicit free list",
    "binary files",
    "matrix",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
syslab-el-demo = "syslab.el_demo:main"
syslab-coins = "syslab.coins:main"
syslab-ipow = "syslab.ipow:main"
syslab-age = "syslab.age:main"
syslab-matsums = "syslab.matsums:main"
syslab-colmins = "syslab.colmins:main"
syslab-reversal = "syslab.reversal:main"
syslab-superscalar = "syslab.superscalar:main"
syslab-make-dept-directory = "syslab.dept_directory:make_main"
syslab-print-department = "syslab.dept_directory:print_main"
syslab-read-items = "syslab.items:main"

[tool.hatch.build.targets.wheel]
packages = ["syslab"]

[tool.pytest.ini_options]
addopts = "-ra"
