
from setuptools import setup, find_packages

setup(
    name="hexgame",
    version="0.1",
    description="Hex-board four-not-three game with an alpha-beta search opponent",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
