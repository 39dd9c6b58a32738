# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="scripthost",
    version="0.1.0",
    description="Host primitives (load, print, quit, IO, FilePath) for running legacy engine scripts on Python",
    packages=find_namespace_packages(where="src", include=["scripthost", "scripthost.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'scripthost=scripthost.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
