#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='graphcompose',
    version='0.1.0',
    description='Compose one GraphQL object type from independently written field providers',
    long_description=read("README.rst"),
    packages=['graphcompose', 'graphcompose.graphql'],
    keywords="graphql schema composition resolvers",
    install_requires=[
        "graphql-core>=3.2,<3.3",
    ],
    extras_require={
        "tests": [
            "pytest>=7",
            "precisely>=0.1.9",
        ],
    },
    python_requires=">=3.10",
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
