# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="filereq",
    version="0.1.0",
    description="Declare required input files as AND/OR expressions and explain what is missing",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["filereq", "filereq.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'filereq=filereq.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
