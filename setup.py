"""
Setup script for econ-quiz.

econ-quiz is a terminal revision quiz for an economics course. It offers
five question modes:

1. Diagram - explain a diagram, graded on required keywords
2. Calculation - numeric answers within a 1% tolerance
3. Essay - outline answers, graded on required keywords
4. Case study - multi-part questions on a scenario and data table
5. Flashcards - short definitions, exact match

The 'econ-quiz' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="econ-quiz",
    version="1.0.0",
    description="Terminal-based economics revision quiz",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"econ_quiz.data": ["*.json"]},
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "econ-quiz=econ_quiz.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="economics revision quiz cli education",
)
