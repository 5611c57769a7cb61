[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mermaidgen"
version = "0.1.0"
description = "Build Mermaid flowcharts, sequence diagrams and state diagrams from Python objects."
requires-python = ">=3.10"
dependencies = []
keywords = ["mermaid", "diagram", "flowchart", "sequence-diagram", "state-diagram", "documentation"]
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
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mermaidgen"]

[tool.pytest.ini_options]
addopts = "-ra"
