[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apptemplate"
version = "0.1.0"
description = "A small JSON web service template with environment-driven configuration, database access through SQLAlchemy and rotating file logging."
requires-python = ">=3.10"
keywords = ["flask", "sqlalchemy", "mysql", "template", "rest", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
apptemplate = "apptemplate.app:main"

[tool.hatch.build.targets.wheel]
packages = ["apptemplate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
