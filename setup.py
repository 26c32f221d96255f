# setup.py
from setuptools import setup, find_packages

setup(
    name="docsindex",
    version="0.1.0",
    description="Scan a documentation folder and emit the JSON index used by the site navigation",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'docsindex=docsindex.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
