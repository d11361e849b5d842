from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fwstep",
    version="0.1.0",
    description="Step-by-step Floyd-Warshall all-pairs shortest paths with path reconstruction.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    package_data={"fwstep.schemas": ["*.json"]},
    install_requires=["jsonschema", "networkx", "PyYAML"],
    extras_require={"dev": ["pytest"]},
    entry_points={"console_scripts": ["fwstep=fwstep.cli:main"]},
)
