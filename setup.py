"""Package setup for netgear_console."""

from setuptools import setup, find_packages

setup(
    name="netgear-console",
    version="1.0.0",
    description="Client for the web console of Netgear GS30x/GS316 PoE switches",
    packages=find_packages(include=["netgear_console", "netgear_console.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "netgear-console=netgear_console.cli:main",
        ],
    },
)
