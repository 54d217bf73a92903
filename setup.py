# This code is a Qiskit project.
#
# (C) Copyright IBM 2026.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"The graphlc setup file."

import os

from setuptools import find_packages, setup

ROOT_DIR = os.path.abspath(os.path.dirname(__file__))

README_PATH = os.path.join(ROOT_DIR, "README.md")
with open(README_PATH) as readme_file:
    README = readme_file.read()

with open(os.path.join(ROOT_DIR, "graphlc", "VERSION.txt")) as version_file:
    VERSION = version_file.read().strip()

requirements = [
    "numpy>=1.17",
    "sympy>=1.3",
    "rustworkx>=0.13.0",
    "z3-solver>=4.8",
]

setup(
    name="graphlc",
    version=VERSION,
    description="Synthesis of local Clifford layers mapping stabilizer states onto graph states",
    long_description=README,
    long_description_content_type="text/markdown",
    author="graphlc developers",
    license="Apache 2.0",
    classifiers=[
        "Environment :: Console",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
    ],
    keywords="quantum graph-state stabilizer clifford synthesis",
    packages=find_packages(include=["graphlc", "graphlc.*"]),
    package_data={"graphlc": ["VERSION.txt"]},
    install_requires=requirements,
    include_package_data=True,
    python_requires=">=3.10",
    extras_require={
        "gurobi": ["gurobipy>=10.0"],
        "test": ["ddt>=1.2.0", "hypothesis>=4.24.3", "pytest"],
    },
)
