"""Setup script for abm-simulator package."""

from setuptools import setup, find_packages

setup(
    name="abm-simulator",
    version="1.0.0",
    description="Price Path Simulation using Arithmetic Brownian Motion",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="ABM Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "abm=abm.cli:main",
        ],
    },
)
