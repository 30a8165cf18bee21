[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "Small teaching models: a payroll office, a directed graph container and a pizzeria."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "payroll", "graph", "digraph", "pizzeria", "object model"]
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
workbench-payroll-demo = "workbench.salary.payroll_demo:main"
workbench-graph-demo = "workbench.graph.graph_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

[tool.pytest.ini_options]
addopts = "-ra"
