#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Installation driver (and development utility entry point) for epidisco-pipeline
"""

import os
import sys

from setuptools import find_packages, setup


def parse_requirements(path):
    """Parse ``requirements.txt`` at ``path``."""
    requirements = []
    with open(path, "rt") as reqs_f:
        for line in reqs_f:
            line = line.strip()
            if line.startswith("-r"):
                fname = line.split()[1]
                inner_path = os.path.join(os.path.dirname(path), fname)
                requirements += parse_requirements(inner_path)
            elif line != "" and not line.startswith("#"):
                requirements.append(line)
    return requirements


# Enforce python version >=3.12
if sys.version_info < (3, 12):
    print("At least Python 3.12 is required.\n", file=sys.stderr)
    sys.exit(1)

package_root = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(package_root, "README.md")) as readme_file:
    readme = readme_file.read()

with open(os.path.join(package_root, "CHANGELOG.md")) as history_file:
    history = history_file.read()

# Get requirements
requirements = parse_requirements(os.path.join(package_root, "requirements/base.txt"))

test_requirements = [
    req
    for req in parse_requirements(os.path.join(package_root, "requirements/test.txt"))
    if req not in requirements
]

version = {}
with open(os.path.join(package_root, "epidisco_pipeline/_version.py")) as fp:
    exec(fp.read(), version)
version = version["__version__"]

setup(
    name="epidisco-pipeline",
    version=version,
    description="Tumor/normal/RNA neoantigen discovery pipeline assembly",
    long_description=readme + "\n\n" + history,
    long_description_content_type="text/markdown",
    packages=find_packages(include=("epidisco_pipeline", "epidisco_pipeline.*")),
    entry_points={
        "console_scripts": ("epidisco-graph = epidisco_pipeline.apps.epidisco_graph:main",)
    },
    include_package_data=True,
    install_requires=requirements,
    extras_require={"test": test_requirements},
    python_requires=">=3.12",
    license="Apache License 2.0",
    zip_safe=False,
    keywords="bioinformatics",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
    ],
)
