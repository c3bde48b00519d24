"""
Setup configuration for the project.
Allows the package to be installed in development mode.
"""

from setuptools import setup, find_packages

setup(
    name="resultlib",
    version="1.0.0",
    description="Two-variant Result type for composing fallible operations without exceptions",
    packages=find_packages(include=["resultlib", "resultlib.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    python_requires=">=3.10",
)
