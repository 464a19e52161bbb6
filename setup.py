#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

try:
    readme_text = open("README.rst", "r").read()
except IOError:
    readme_text = ""

setup(
    name="geoserver-repository",
    version="1.0.0",
    description="GeoServer REST resource repository",
    long_description=readme_text,
    keywords="GeoServer REST Configuration WMS WMTS",
    license="MIT",
    install_requires=[
        "requests >= 2.14.0",
    ],
    package_dir={"": "src"},
    packages=find_packages("src"),
    test_suite="test",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Topic :: Scientific/Engineering :: GIS",
        "Programming Language :: Python :: 3.8",
    ],
)
