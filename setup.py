"""DynamoDB Response Parser for Python."""
import io
import os
import re

from setuptools import find_packages, setup

VERSION_RE = re.compile(r"""__version__ = ['"]([0-9.]+)['"]""")
HERE = os.path.abspath(os.path.dirname(__file__))


def read(*args):
    """Reads complete file contents."""
    return io.open(os.path.join(HERE, *args), encoding="utf-8").read()


def get_version():
    """Reads the version from this module."""
    init = read("src", "dynamodb_response_parser", "identifiers.py")
    return VERSION_RE.search(init).group(1)


def get_requirements(*path):
    """Reads a requirements file."""
    requirements = read(*path)
    return [r for r in requirements.strip().splitlines()]


setup(
    name="dynamodb-response-parser",
    version=get_version(),
    packages=find_packages("src"),
    package_dir={"": "src"},
    author="Amazon Web Services",
    maintainer="Amazon Web Services",
    description="Convert typed DynamoDB responses to native Python data structures",
    long_description=read("README.rst"),
    keywords="dynamodb boto3 attribute value deserialization",
    data_files=["README.rst", "requirements.txt"],
    license="Apache License 2.0",
    python_requires=">=3.6",
    install_requires=get_requirements("requirements.txt"),
    extras_require={"test": get_requirements("test", "requirements.txt")},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Database",
    ],
)
