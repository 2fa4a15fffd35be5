"""Packaging for WordTracker."""

from setuptools import setup, find_packages

setup(
    name="wordtracker",
    version="0.1.0",
    description="Persistent word occurrence index for text files",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "flake8>=6.0",
            "mypy>=1.0",
        ],
    },
    entry_points={
        "console_scripts": ["wordtracker=wordtracker.cli:run"],
    },
)
