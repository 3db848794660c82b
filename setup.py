from setuptools import setup, find_packages

setup(
    name="gh-api-cli",
    version="0.1.0",
    description="Command-line client for GitHub users, repositories, contributors and rate limits",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
        "requests>=2.28.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gh-api-cli=gh_api_cli.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
