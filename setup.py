#!/usr/bin/env python

"""
Ref: https://github.com/argoai/argoverse-api/blob/master/setup.py
A setuptools based setup module.
See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

from pathlib import Path

# Always prefer setuptools over distutils
from setuptools import find_namespace_packages, setup

# Get the long description from the README file
long_description = (Path(__file__).parent / "README.md").read_text()

setup(
    name="tagmap",
    version="0.1.0",
    description="Fiducial tag maps built from pairwise tag measurements",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    author="",
    author_email="",
    license="BSD-3-Clause",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: POSIX",
        "Operating System :: MacOS",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Image Recognition",
    ],
    keywords="computer-vision fiducials mapping",
    packages=find_namespace_packages(include=["tagmap", "tagmap.*"]),
    include_package_data=True,
    python_requires=">= 3.8",
    install_requires=[
        "networkx",
        "numpy",
        "PyYAML",
        "yacs",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
