"""
Setup configuration for Enumerant.

Variant iterator code generation for sum types.
"""

from setuptools import setup, find_packages
import os


# Read version from package
def get_version():
    """Extract version from package __init__.py"""
    version_file = os.path.join(os.path.dirname(__file__), "enumerant", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    """Read long description from README.md if available"""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "Enumerant: variant iterator generation for sum types"


setup(
    name="enumerant",
    version=get_version(),
    author="Enumerant Team",
    author_email="enumerant@example.com",
    description="Variant iterator code generation for sum types",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    package_data={
        "enumerant.codegen.templates": ["rust/*.j2", "python/*.j2"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Software Development :: Compilers",
    ],
    python_requires=">=3.8",
    install_requires=[
        "jinja2>=3.0",
        "pyyaml>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "isort>=5.0",
            "mypy>=0.900",
            "flake8>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "enumerant-gen=enumerant.cli:main",
            "enumerant-info=enumerant.utils.info:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="code generation, sum types, enums, iterators, derive",
)
