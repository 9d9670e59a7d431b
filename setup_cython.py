"""
Setup script for Cythonizing the counter modules.

This script compiles the core Python modules of the counter package
using Cython for performance optimization.

Usage:
    python setup_cython.py build_ext --inplace
"""
from setuptools import setup, Extension
from Cython.Build import cythonize

# Define the modules to be cythonized
extensions = [
    Extension("counter.counter", ["counter/counter.py"]),
    Extension("counter.most_common", ["counter/most_common.py"]),
]

setup(
    name="frequency-counter-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            'language_level': '3',
            'boundscheck': False,
            'embedsignature': True,
        },
        annotate=True,  # Generate HTML annotation files
    ),
)
