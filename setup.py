"""Setup configuration for NoiseFilter."""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="noisefilter",
    version="1.0.0",
    author="Stephen Cox",
    author_email="",
    description="Ignore-pattern filtering for captured console logs and network requests",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Debuggers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
        "aiofiles>=23.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "black==23.7.0",
            "flake8>=6.1.0",
            "mypy>=1.5.0",
            "types-aiofiles",
            "types-PyYAML",
        ],
    },
)
