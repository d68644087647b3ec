# setup.py

from setuptools import setup, find_packages

setup(
    name="tsp_playground",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Interactive tour construction with nearest-neighbour, random and 2-opt heuristics",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "tsp-playground=tsp_playground.visualization.demo:main",
        ],
    },
)
