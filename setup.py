"""
Setup script for the EventManager CLI.

Installation:
    pip install -e .            # Development mode (editable install)
    pip install -e ".[test]"    # With test dependencies

After installation, run with:
    eventmanager
    python -m eventmanager
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README for long description
readme_file = Path(__file__).resolve().parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="eventmanager-cli",
    version="0.1.0",
    description="Command-line manager for personal events and their participants",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["eventmanager", "eventmanager.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "hypothesis>=6.0",
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "eventmanager=eventmanager.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
