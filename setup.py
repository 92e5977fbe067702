from setuptools import setup, find_namespace_packages

setup(
    name="centrallimit",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src",
        include=["centrallimit", "centrallimit.*"],
    ),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "scikit-learn",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["centrallimit=centrallimit.cli:main"],
    },
)
