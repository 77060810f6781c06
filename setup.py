from setuptools import setup, find_packages

setup(
    name="skillswap-pro",
    version="1.0.0",
    packages=find_packages(include=["skillswap_pro", "skillswap_pro.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "psycopg2-binary",
        "passlib[bcrypt]",
        "bcrypt<5",
        "pydantic[email]",
        "pydantic-settings",
        "python-dotenv",
        "httpx",
        "anthropic",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
