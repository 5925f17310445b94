from setuptools import find_packages, setup

setup(
    name="unitkit",
    version="0.1.0",
    description="Generate systemd service unit files and control them through systemctl",
    packages=find_packages(include=["unitkit", "unitkit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Typed unit configuration
        "typer",  # CLI
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "unitkit=unitkit.cli:main",
        ],
    },
)
