from setuptools import setup, find_packages

setup(
    name="folio",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    install_requires=[
        "structlog>=23.1.0",
        "pydantic>=2.0.0",
        "pydantic-core>=2.0.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.1",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "folio=folio.cli:app",
        ],
    },
    python_requires=">=3.9",
)
