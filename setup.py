#!/usr/bin/env python

from setuptools import setup, find_packages


with open("README.md", "r") as fh:
    long_description = fh.read()

CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Security",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development",
]


setup(
    name="py-dwn-did",
    version="0.1.0",
    description="DWN configuration and Tech Preview endpoint discovery for DIDs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT License",
    platforms=["OS Independent"],
    classifiers=CLASSIFIERS,
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={"dwn_did.resolver": ["schemas/*.json"]},
    include_package_data=True,
    install_requires=[
        "base58>=1.0.3",
        "ecdsa>=0.13.2",
        "httpx>=0.23",
        "jsonref>=0.2",
        "jsonschema>=3.2",
        "pycryptodome>=3.15.0",
    ],
    extras_require={"test": ["pytest>=6.0", "pytest-asyncio>=0.21"]},
    python_requires=">=3.9",
)
