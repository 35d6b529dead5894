from setuptools import setup, find_packages

setup(
    name="shiftclock",
    version="0.1.0",
    description="Track paid work shifts from the terminal & export earnings",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
        "readchar",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "shiftclock=shiftclock.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
