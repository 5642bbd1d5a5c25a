from setuptools import find_packages, setup

setup(
    name="sv-supervisor",
    version="0.3.0",
    description="SV - query and control supervisord processes by index, name, or range",
    packages=find_packages(include=["sv", "sv.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI (later releases vendor click, breaking click context lookup)
        "click",  # Context lookup and usage errors
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "requests",  # XML-RPC transport
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "sv=sv.cli:main",
        ],
    },
)
