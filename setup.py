"""
Setup configuration for Rosalina, the Unity UI code-behind generator.
"""

from setuptools import setup, find_packages
import os


# Read version from package
def get_version():
    """Extract version from package __init__.py"""
    version_file = os.path.join(os.path.dirname(__file__), "rosalina", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "1.0.0"


# Read long description from README
def get_long_description():
    """Read long description from README.md if available"""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "Rosalina: C# code-behind generator for Unity UI Toolkit documents"


setup(
    name="rosalina",
    version=get_version(),
    author="Rosalina Team",
    author_email="rosalina@example.com",
    description="C# code-behind generator for Unity UI Toolkit documents",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    package_data={
        "rosalina.codegen.templates": ["csharp/*.j2"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Games/Entertainment",
    ],
    python_requires=">=3.8",
    install_requires=[
        "jinja2>=3.0",
        "PyYAML>=5.4",
    ],
    extras_require={
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
            "rosalina-generate=rosalina.cli:run",
            "rosalina-info=rosalina.utils.info:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="unity, uxml, ui-toolkit, code-generation, csharp",
)
