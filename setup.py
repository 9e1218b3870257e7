from setuptools import find_packages, setup

setup(
    name="catalog-admin",
    version="0.1.0",
    description="Product configuration materialization and replace-on-edit engine",
    packages=find_packages(include=["catalog_admin", "catalog_admin.*"]),
    python_requires=">=3.9",
    install_requires=[
        "SQLAlchemy>=1.4",
        "click>=8.0",
        "pandas>=1.5",
        "python-dotenv>=1.0"
    ],
    extras_require={"dev": ["pytest"]},
    entry_points={
        "console_scripts": [
            "catalog-admin=catalog_admin.cli.main:cli",
        ],
    },
)
