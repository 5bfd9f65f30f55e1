import os
from typing import List

import arm_models
from setuptools import setup, find_packages


def read(file_name: str) -> str:
    with open(os.path.join(os.path.dirname(__file__), file_name)) as of:
        return of.read()


def requirements(file_name: str) -> List[str]:
    lines = (line.split("#", 1)[0].strip() for line in read(file_name).splitlines())
    return [line for line in lines if line]


setup(
    name=arm_models.__title__,
    version=arm_models.__version__,
    description=arm_models.__description__,
    license=arm_models.__license__,
    packages=find_packages(exclude=["test", "test.*"]),
    package_data={"arm_models": ["py.typed"], "armlib": ["py.typed"]},
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.11",
    install_requires=requirements("requirements.txt"),
    extras_require={"test": requirements("requirements-test.txt")},
    entry_points={"console_scripts": ["arm-model-gen=arm_models.model_gen:main"]},
    classifiers=[
        # Current project status
        "Development Status :: 4 - Beta",
        # Audience
        "Intended Audience :: Developers",
        # License information
        "License :: OSI Approved :: Apache Software License",
        # Supported python versions
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        # Supported OS's
        "Operating System :: POSIX :: Linux",
        "Operating System :: Unix",
        # Extra metadata
        "Natural Language :: English",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
    keywords="azure arm models json",
)
