from setuptools import setup, find_packages

setup(
    name="amazon-product-adapter",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    py_modules=["config_loader"],
    package_data={"contracts": ["schemas/*.json"]},
    python_requires=">=3.10",
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
