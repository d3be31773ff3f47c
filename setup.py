from setuptools import setup, find_namespace_packages

setup(
    name="langtour",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src",
        include=["langtour*"],
    ),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "langtour-demo=langtour.cli:main",
            "langtour-run=langtour.experiments.run_from_config:main",
        ],
    },
)
