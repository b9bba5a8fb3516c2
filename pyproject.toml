[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suggestbox"
version = "0.1.0"
description = "A text input box that suggests words from a word bank by prefix match"
requires-python = ">=3.10"
keywords = ["autocorrect", "suggestions", "prefix", "text input", "pygame"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
suggestbox = "suggestbox.app:main"

[tool.hatch.build.targets.wheel]
packages = ["suggestbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
