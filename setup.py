from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="netalgo",
    version="0.1.0",
    author="Andrey Golovanov",
    description="Classical graph algorithms: union-find, spanning trees, traversal, max-flow and matching.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.11",
    install_requires=["networkx"],
    tests_require=["pytest", "networkx"],
    extras_require={"dev": ["pytest", "networkx"]},
)
