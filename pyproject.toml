[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clinicqueue"
version = "0.1.0"
description = "Triage array and priority waiting queue for clinic and service desks"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "triage", "priority", "patients", "waiting-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clinicqueue-patients = "clinicqueue.patient_demo:main"
clinicqueue-queue = "clinicqueue.queue_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["clinicqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
