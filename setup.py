from setuptools import setup, find_packages

setup(
    name="tellersim",
    version="0.1.0",
    description="Finite-horizon multi-teller queue simulation (M/M/c wait time convergence)",
    author="adamfilli",
    packages=find_packages(include=["tellersim", "tellersim.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["tellersim=tellersim.cli:main"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
