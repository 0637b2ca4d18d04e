#!/usr/bin/env python

from setuptools import setup, find_packages

with open("exemplar/_version.py") as f:
    exec(f.read())

CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: Implementation :: CPython",
    "Topic :: Software Development :: Libraries",
]

REQUIREMENTS = ["click>=8.2", "httpx>=0.23"]

setup(
    classifiers=CLASSIFIERS,
    description="Minimal example programs behind one command line tool",
    entry_points={"console_scripts": ["exemplar = exemplar.commands:exemplar"]},
    extras_require={"test": ["pytest"]},
    install_requires=REQUIREMENTS,
    license="MIT",
    name="exemplar",
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.10",
    zip_safe=False,
    platforms=["any"],
    version=__version__,
)
