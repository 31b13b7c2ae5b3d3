#!/usr/bin/env python3
"""Setup script for docviewer."""

from setuptools import find_packages, setup

setup(
    name="docviewer",
    version="0.1.0",
    description="Read-only HTTP viewer backend for Markdown and JSON document trees",
    packages=find_packages(include=["docviewer", "docviewer.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110,<0.137",
        "uvicorn>=0.27",
        "loguru>=0.7",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "prometheus-client>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.26",
        ],
    },
    entry_points={
        "console_scripts": [
            "docviewer=docviewer.__main__:main",
        ],
    },
)
