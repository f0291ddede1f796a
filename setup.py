# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fshamer",
    version="0.1.0",
    description="Finds the largest directories of a tree with a live terminal view",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fshamer", "fshamer.*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich",  # Human-readable byte and count labels
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fshamer=fshamer.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
)
