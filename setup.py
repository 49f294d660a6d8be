# setup.py

from setuptools import setup, find_packages

setup(
    name="rmq_structures",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Static range-minimum-query structures, from brute force to Fischer-Heun",
    packages=find_packages(exclude=["tests*", "benchmarks*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["rmq-driver=rmq_structures.driver:main"],
    },
)
