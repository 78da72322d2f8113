#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from setuptools import find_packages, setup

# serde_stuff/__init__.py imports pydantic, so the version is read without importing the package
version: dict = {}
with open('serde_stuff/version.py') as fp:
    exec(fp.read(), version)

setup(
    name='serde-stuff',
    version=version['__version__'],
    description='Common field (de)serialization adapters: vec-or-one, base64 and string-or-struct',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=[
        'pydantic>=2.7,<3',
        'PyYAML>=6.0',
        'structlog>=22.3',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': [
            'pytest>=7.2',
        ],
    },
)
