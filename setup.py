"""Setup script for the grayraster project."""

from setuptools import find_packages, setup

setup(
    name="grayraster",
    version="0.1.0",
    description="Pixel-exact geometric and binary operations on 8-bit grayscale images",
    author="VIP Research Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=2.0.0",
        "opencv-python>=4.12.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "grayraster=grayraster.cli:main",
        ],
    },
)
