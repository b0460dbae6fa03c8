""" ecfp build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecfp

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecfp.name,
    version=ecfp.__version__,
    license=ecfp.__license__,
    author=ecfp.__author__,
    author_email=ecfp.__author_email__,
    description="Prime field and elliptic curve arithmetic, for didactical use",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecfp": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords="finite-field prime-field elliptic-curves modular-inverse",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
