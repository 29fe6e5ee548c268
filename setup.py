#!/usr/bin/env python

from setuptools import setup


VERSION = "0.1a1"

setup(
    name="cddom",
    version=VERSION,
    packages=["cddom", "_cddom", "_cddom.plugins"],
    python_requires=">=3.10",
    install_requires=["lxml"],
    extras_require={"test": ["pytest"]},
)
