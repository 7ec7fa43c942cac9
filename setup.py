from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="graphsuite",
    version="0.3.0",
    description="Pluggable graph backends with a shared suite of classic graph algorithms.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=["networkx", "numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["graphsuite=graphsuite.cli:main"]},
)
