from setuptools import find_namespace_packages, setup

setup(
    name="snowflake-dsn",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["snowflake.dsn*"]),
    python_requires=">=3.9",
    install_requires=[
        "click",
        "typer<0.26",
        "rich",
        "tomlkit",
        "snowflake-connector-python",
    ],
    extras_require={
        "test": [
            "pytest",
            "syrupy",
        ],
    },
    entry_points={
        "console_scripts": [
            "snow-dsn = snowflake.dsn._app.__main__:main",
        ],
    },
)
