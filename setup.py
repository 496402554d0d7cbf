"""
Jungle King project setup script
"""

from setuptools import setup, find_packages

setup(
    name="jungle-king",
    version="1.0.0",
    description="Jungle King (Dou Shou Qi) rule engine with an HTTP API",
    author="",
    packages=find_packages(include=["jungle_king", "jungle_king.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.118.0",
        "uvicorn>=0.37.0",
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "hypothesis>=6.0.0",
            "httpx>=0.27.0",
        ],
    },
)
