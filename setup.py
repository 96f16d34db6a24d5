from setuptools import find_packages, setup

setup(
    name="rwc",
    version="0.1.0",
    description="Count bytes, UTF-8 characters, words and lines in files",
    packages=find_packages(include=["rwc", "rwc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12,<0.28",  # Command line interface
        "click",  # Binary stdin stream and CLI exceptions (typer's base)
        "rich",  # Terminal table rendering
        "pydantic>=2",  # Configuration and option models
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "rwc=rwc.cli:main",
        ],
    },
)
