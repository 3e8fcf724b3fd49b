"""
Setup script for Iris Charts
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

# Read requirements
requirements_file = Path(__file__).parent / "requirements.txt"
if requirements_file.exists():
    with open(requirements_file, 'r', encoding='utf-8') as f:
        requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]
else:
    requirements = []

# Test requirements
test_requirements = [
    'pytest>=7.0.0',
    'pytest-cov>=3.0.0',
]

setup(
    name="iris-charts",
    version="1.0.0",
    author="Iris Charts Team",
    author_email="",
    description="Scatter plot and per-species boxplot geometry for the Iris dataset",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['tests', 'tests.*', 'scripts']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Visualization",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
        'dev': test_requirements,
    },
    include_package_data=True,
    zip_safe=False,
    keywords=[
        'iris',
        'boxplot',
        'quartiles',
        'scatter-plot',
        'visualization',
    ],
)
