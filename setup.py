# setup.py
from setuptools import setup, find_packages

setup(
    name="txbridge",
    version="0.1.0",  # Match txbridge.__version__
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.15.0",
        "pydantic>=2.0",
        "aiohttp>=3.8",
        "yarl>=1.6",
        "PyYAML>=5.4",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "pytest-cov>=4.1",
            "pytest-mock>=3.10",
            "httpx>=0.24",
            "black>=23.0",
            "isort>=5.12",
            "flake8>=6.0",
            "mypy>=1.0"
        ],
    },
    entry_points={
        "console_scripts": [
            "txbridge=txbridge.cli:main",
        ],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Backend-for-frontend proxy for address transaction history",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/txbridge",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
