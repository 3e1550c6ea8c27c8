# setup.py
from setuptools import setup, find_packages

setup(
    name="rinha",
    version="0.1.0",
    description="Tree-walking interpreter for Rinha programs given as JSON ASTs",
    packages=find_packages(include=["rinha", "rinha.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["rinha = rinha.__main__:main"],
    },
    zip_safe=False,
)
