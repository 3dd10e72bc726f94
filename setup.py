#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = [
    "numpy (>=1.22)",
]

extras = {
    "tests": [
        "pytest (>=7.0)",
    ],
}

setup(name='shuntcalc',
      version='1.0.0',
      description='Arithmetic expression engine with variables and unary functions',
      author='BHodges',
      python_requires='>=3.8',
      install_requires=requires,
      extras_require=extras,
      scripts=['shunt-calc.py'],
      packages=find_packages(exclude=['tests', 'tests.*']))
