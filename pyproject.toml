[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlopskit"
version = "0.1.0"
description = "Small command-line tools, web services and serverless-style handlers for everyday MLOps chores"
requires-python = ">=3.10"
keywords = ["mlops", "cli", "microservice", "lambda", "dedupe", "dataframe", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "flask>=2.2",
    "pandas>=1.5",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
]

[project.scripts]
marco-polo = "mlopskit.marcopolo:main"
hello-mlops = "mlopskit.hello:main"
greet = "mlopskit.greet:main"
calc-service = "mlopskit.calc:main"
textops-service = "mlopskit.textops:main"
fruit-service = "mlopskit.fruit:main"
fruit-logger = "mlopskit.fruitlog:main"
deduper = "mlopskit.dedupe:main"
parallel-dedupe = "mlopskit.parallel:main"
roulette = "mlopskit.roulette:main"
frame = "mlopskit.frame:main"
lyrics = "mlopskit.lyrics:main"

[tool.hatch.build.targets.wheel]
packages = ["mlopskit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
