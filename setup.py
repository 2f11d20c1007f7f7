from setuptools import setup, find_packages

setup(
    name="magento-account-lifecycle",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "playwright>=1.40.0",
        "pydantic>=2.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "magento-account-lifecycle=account_lifecycle.cli:main"
        ]
    },
    python_requires=">=3.8",
)
