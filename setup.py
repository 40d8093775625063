from setuptools import find_packages, setup

setup(
    name="salience",
    version="0.1.0",
    description="Keyword extraction ranked by accumulated, boostable priority",
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.8",
    install_requires=[
        "typer>=0.9",
        "rich>=13.7",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "salience=cli.salience_cli:app",
        ]
    },
)
