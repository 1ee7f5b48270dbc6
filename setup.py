from setuptools import find_packages, setup

setup(
    name="svcreinstall",
    version="0.1.0",
    description="Stop, uninstall, reinstall and restart a Windows service with InstallUtil",
    packages=find_packages(include=["svcreinstall", "svcreinstall.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12,<0.17",  # CLI (releases built on click)
        "click>=8.1,<8.3",  # Context lookup and usage errors
        "rich",  # Terminal formatting
        "pydantic>=2",  # Request and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
        "psutil",  # Service enumeration and status
        "pywin32; sys_platform == 'win32'",  # Service control
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
            "types-PyYAML",  # Type stubs
            "types-psutil",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "svcreinstall=svcreinstall.cli:main",
        ],
    },
)
