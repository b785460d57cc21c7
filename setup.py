# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sizescan",
    version="1.0.0",
    description="Concurrent directory scanner reporting the largest files and total disk usage",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sizescan", "sizescan.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'sizescan=sizescan.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
