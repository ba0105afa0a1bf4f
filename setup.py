"""Setup script for Repo Buddy"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="repo-buddy",
    version="0.1.0",
    description="Multi-language repository convention profiler built on tree-sitter",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    python_requires=">=3.11",
    install_requires=[
        "tree-sitter>=0.25.0",
        "tree-sitter-go>=0.23.0",
        "tree-sitter-python>=0.23.0",
        "tree-sitter-typescript>=0.23.0",
        "tree-sitter-rust>=0.23.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
        "httpx>=0.24.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "repo-buddy=repo_buddy.cli:app",
        ],
    },
    keywords="conventions static-analysis tree-sitter codebase-analysis guidelines",
)
