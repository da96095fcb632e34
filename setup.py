from setuptools import setup, find_packages


setup(
    name="adtgraph",
    version="0.1.0",
    description="A generic directed graph abstract data type with BFS path queries.",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx"],
    extras_require={"test": ["pytest"]},
)
