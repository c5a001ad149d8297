from setuptools import setup, find_packages

setup(
    name="jira-tickets",
    version="1.0.0",
    description="Console viewer for Jira tickets via the REST API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"jira_tickets.configs": ["config.yml"]},
    install_requires=[
        "requests",
        "typer",
        "pydantic>=2",
        "python-dotenv",
        "PyYAML",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "jira-tickets=jira_tickets.cli:app",
        ],
    },
    python_requires=">=3.9",
)
