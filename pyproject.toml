[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvekit"
version = "1.0.0"
description = "Parametric 3D curves (circle, ellipse, helix) with points, derivatives and a 3D viewer"
requires-python = ">=3.10"
keywords = ["geometry", "curves", "parametric", "helix", "ellipse", "circle", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
curvekit = "curvekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["curvekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
