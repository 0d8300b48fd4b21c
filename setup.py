"""setuptools setup for mtimer.

Install for development:
    pip install -e ".[test]"
    mtimer time 30 -c
"""

from setuptools import setup, find_packages

setup(
    name="mtimer",
    version="0.1.0",
    description="Minimal timer: plays sound cues at timed offsets",
    packages=find_packages(include=["mtimer", "mtimer.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "numpy>=1.24",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "mtimer=mtimer.cli:main",
        ],
    },
)
