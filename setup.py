# setup.py
from setuptools import setup, find_packages

setup(
    name="seo_doctor",
    version="0.1.0",
    description="Deterministic SEO audit and CI gate for static HTML pages",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"seo_doctor": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "Jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "seo-doctor=seo_doctor.cli:main",
        ],
    },
    python_requires=">=3.11",
)
