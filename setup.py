from setuptools import setup, find_packages

setup(
    name="papernotes",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "beautifulsoup4",
        "click",
        "loguru",
        "python-dotenv",
        "ratelimit",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "papernotes=papernotes.cli:cli",
        ],
    },
)
