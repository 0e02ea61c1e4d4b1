#!/usr/bin/env python

from setuptools import find_packages, setup

required = []

setup(
    name="seqex",
    version="0.1.0",
    description="Lazy, chainable sequence combinators",
    packages=find_packages(exclude=["test", "test.*"]),
    entry_points={},
    python_requires=">=3.6",
    install_requires=required,
    extras_require={
        "test": ["pytest", "numpy"],
    },
    include_package_data=True,
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
