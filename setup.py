# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="pathtree",
    version="1.0.0",
    description="Build and query a file/directory tree from a list of slash-delimited paths",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["pathtree", "pathtree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",  # Remote path listings (--url)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'pathtree=pathtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
