"""
Setup script for the envkit package.
"""

from setuptools import setup, find_packages

setup(
    name="envkit",
    version="1.0.0",
    description="Namespaced, typed access to environment variables loaded from .env.<environment> files",
    author="envkit Team",
    packages=find_packages(include=["envkit", "envkit.*"]),
    python_requires=">=3.8",
    install_requires=[
        # Settings files
        "python-dotenv>=1.0.0",

        # envkit options file
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
