from setuptools import setup, find_packages

setup(
    name="wikipedia-events",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "beautifulsoup4>=4.12.0",
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wikipedia-events=wikipedia_events.cli:main",
        ],
    },
    python_requires=">=3.8",
)
