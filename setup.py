# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


with open('README.md') as f:
    readme = f.read()

setup(
    name='fastpoly',
    version='1.0.0',
    description='Univariate polynomial arithmetic with fast multiplication, division and multi-point evaluation',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='',
    author_email='',
    license='MIT',
    packages=find_packages(exclude=('tests', 'docs')),
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'py_ecc',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
