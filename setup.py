from setuptools import setup, find_packages

setup(
    name="c4engine",
    version="0.2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",  # Environment wrapper for automated move sources
    ],
    extras_require={
        "test": ["pytest"],
    },
)
