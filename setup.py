""" fp2ec build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import fp2ec

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=fp2ec.name,
    version=fp2ec.__version__,
    license=fp2ec.__license__,
    author=fp2ec.__author__,
    author_email=fp2ec.__author_email__,
    description="Elliptic curves over GF(p^2): group law and point explorer",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves finite-fields quadratic-extension frobenius "
        "torsion-points"
    ),
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
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
