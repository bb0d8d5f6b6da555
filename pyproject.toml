[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelkit"
version = "0.1.0"
description = "Headless RGBA images, depth-sorted render queues, input hooks, XPM42 loading and small text utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "pixels", "image", "xpm42", "render-queue", "printf"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixelkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
