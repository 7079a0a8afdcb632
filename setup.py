"""
Setup script for the twentyq-server package.

Installs the ``twentyq`` package from src/ and a ``twentyq`` console
script that runs the HTTP server.
"""

from setuptools import setup, find_packages


setup(
    name="twentyq-server",
    version="1.0.0",
    description="Daily 20 Questions game server - LLM-answered yes/no questions with a leaderboard",
    author="Course Staff",
    license="Proprietary",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "anthropic>=0.40.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "sqlalchemy>=2.0",
        "apscheduler>=3.10,<4",
        "requests>=2.31.0",
    ],
    extras_require={
        "postgres": ["psycopg[binary]>=3.1"],
        "dev": [
            "pytest>=7.0",
            "httpx>=0.25",
        ],
    },
    entry_points={
        "console_scripts": [
            "twentyq=twentyq.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: FastAPI",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
