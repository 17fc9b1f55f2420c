#!/usr/bin/env python
from setuptools import find_packages, setup

about = {}
with open("src/life_tools/version.py") as f:
    exec(f.read(), about)


setup(
    name="life-tools",
    version=about["__version__"],
    description="Python package for reading and writing Life RLE pattern files",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
        "Pillow>=9.1.0",
        'typing_extensions; python_version < "3.11"',
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "life-tools=life_tools.__main__:main",
        ],
    },
)
