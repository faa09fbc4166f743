from setuptools import setup, find_packages

setup(
    name="marketplace-adapters",
    version="0.1.0",
    packages=find_packages(include=["marketplace_adapters", "marketplace_adapters.*"]),
    package_data={"marketplace_adapters.rakuten": ["schemas/*.json"]},
    install_requires=[
        "jsonschema>=4.20.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
)
