#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JDELTA_PATH = HERE / "jdelta"


def get_version(path):
    with open(path) as f:
        match = re.search(r"^version_info = \((\d+), (\d+), (\d+)\)", f.read(), re.M)
    return ".".join(match.groups())


VERSION = get_version(JDELTA_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
        name='jdelta',
        version=VERSION,
        description='Compute and apply JSON Patch (RFC 6902) deltas between JSON documents',
        long_description=LONG_DESCRIPTION,
        long_description_content_type='text/markdown',
        license='BSD-3-Clause',
        python_requires='>=3.8',
        packages=find_packages(),
        package_data={
            'jdelta': ['patch_format.schema.json'],
            'jdelta.tests': ['files/*.json'],
        },
        install_requires=[
            'colorama',
            'jupyter_core',
            'traitlets>=5',
        ],
        extras_require={
            'test': [
                'jsonschema',
                'pytest>=6.0',
            ],
        },
        entry_points={
            'console_scripts': [
                'jdelta = jdelta.__main__:main_dispatch',
                'jdiff = jdelta.jdiffapp:main',
                'jpatch = jdelta.jpatchapp:main',
                'jshow = jdelta.jshowapp:main',
            ],
        },
        classifiers=[
            'Intended Audience :: Developers',
            'License :: OSI Approved :: BSD License',
            'Programming Language :: Python :: 3',
        ],
    )
