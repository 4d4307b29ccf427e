from setuptools import find_packages, setup

setup(
    name="api-response",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "fastapi>=0.110",
        "starlette>=0.36",
        "pydantic>=2.5",
        "structlog>=23.1",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
    description="Standardized JSON success and error responses for FastAPI applications.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Framework :: FastAPI",
    ],
    python_requires=">=3.10",
)
