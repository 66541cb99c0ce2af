[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppgfx"
version = "0.1.0"
description = "Small computer graphics toolkit: framebuffers, line drawing, Bezier curves, ray casting, path tracing, software rasterization and a tiny scene game model"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "graphics",
    "rendering",
    "raytracing",
    "rasterization",
    "bezier",
    "bresenham",
    "framebuffer",
]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ppgfx-gradient = "ppgfx.gradient:main"
ppgfx-filter = "ppgfx.filter:main"
ppgfx-bresenham = "ppgfx.bresenham:main"
ppgfx-raycast = "ppgfx.raycast:main"
ppgfx-raytrace = "ppgfx.raytrace:main"
ppgfx-raster = "ppgfx.raster:main"

[tool.hatch.build.targets.wheel]
packages = ["ppgfx"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
