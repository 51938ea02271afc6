"""Setup module for the Negative Test Calculator."""
from pathlib import Path
from setuptools import setup, find_packages

PROJECT_DIR = Path(__file__).parent.resolve()

README_FILE = PROJECT_DIR / "README.md"
LONG_DESCRIPTION = README_FILE.read_text(encoding="utf-8")

REQUIRES = [
    "flask>=3.0.0",
    "flask-cors>=4.0.0",
    "matplotlib>=3.7.0",
    "numpy>=1.24.0",
    "voluptuous>=0.13.1",
]

TEST_REQUIRES = [
    "pytest>=7.4.0",
    "pytest-cov>=4.1.0",
]

setup(
    name="negative_test_calculator",
    version="1.0.0",
    description="Probability of no infection given a negative test, with group risk projection",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "scripts"]),
    package_data={"calculator": ["templates/*.html"]},
    python_requires=">=3.10",
    install_requires=REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
    ],
)
