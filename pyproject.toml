[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hcat"
version = "0.1.0"
description = "Template helper functions, dependency data views and a token-file dependency for configuration rendering"
requires-python = ">=3.10"
keywords = ["templating", "template-functions", "consul", "vault", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hcat"]

[tool.pytest.ini_options]
addopts = "-ra"
