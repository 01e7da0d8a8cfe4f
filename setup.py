#!/usr/bin/env python3
"""
Setup script for stablenum

Builds the pure Python package providing the W_0(exp(x)) evaluator and
compensated summation strategies.
"""

from pathlib import Path

from setuptools import setup, find_packages

# Package metadata
PACKAGE_NAME = "stablenum"
VERSION = "1.0.0"
DESCRIPTION = "Lambert W of exp(x) with ulp-level error bounds, and compensated summation strategies"
AUTHOR = "stablenum Contributors"
LICENSE = "MIT"

# Read long description from README
def read_readme():
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return DESCRIPTION

# Package requirements
def get_requirements():
    """Get package requirements."""
    base_requirements = [
        "numpy>=1.19.0",
        "torch>=1.9.0",
    ]
    
    dev_requirements = [
        "pytest>=6.0",
        "pytest-cov>=2.0",
        "black>=21.0",
        "flake8>=3.8",
        "mypy>=0.900",
    ]
    
    benchmark_requirements = [
        "pandas>=1.3",
    ]
    
    return {
        "base": base_requirements,
        "dev": dev_requirements,
        "benchmark": benchmark_requirements,
    }

# Setup configuration
def main():
    """Main setup function."""
    requirements = get_requirements()
    
    # Extras require for optional dependencies
    extras_require = {
        "dev": requirements["dev"],
        "test": requirements["dev"],
        "benchmark": requirements["benchmark"],
        "all": requirements["dev"] + requirements["benchmark"],
    }
    
    setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author=AUTHOR,
        license=LICENSE,
        
        # Package configuration
        packages=find_packages(include=["stablenum", "stablenum.*"]),
        
        # Dependencies
        install_requires=requirements["base"],
        extras_require=extras_require,
        python_requires=">=3.8",
        
        # Metadata for PyPI
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Science/Research",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9", 
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Operating System :: OS Independent",
        ],
        keywords=[
            "numerical", "lambert-w", "summation", "kahan", "floating-point",
            "precision", "error-correction", "scientific-computing"
        ],
        
        zip_safe=True,
    )

if __name__ == "__main__":
    main()
