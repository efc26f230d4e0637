from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name             = "pymetencoder",
    version          = "0.1.0",
    description      = "Python module to encode station observations into SYNOP groups",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    license          = "Open Government License v3.0",
    packages         = [
        "pymetencoder",
        "pymetencoder.synop"
    ],
    python_requires  = ">=3.7",
    extras_require   = {
        "test": ["pytest"]
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: Other/Proprietary License",
        "Programming Language :: Python :: 3"
    ]
)
