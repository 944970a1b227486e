"""
Setup script for b3jones.
"""

from setuptools import setup, find_packages

setup(
    name="b3jones",
    version="1.0.0",
    description="Jones polynomials of 3-strand braid closures via a Kauffman bracket recurrence",
    author="b3jones Project",
    packages=find_packages(include=["b3jones", "b3jones.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "b3jones=b3jones.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
