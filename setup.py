from setuptools import setup, find_namespace_packages

setup(
    name="locallibrary-catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['catalog*', 'web*', 'cli*']),
    include_package_data=True,
    package_data={
        "web": ["templates/*.html"],
    },
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "fastapi",
        "pydantic>=2",
        "pydantic-core",
        "Jinja2",
        "MarkupSafe",
        "python-multipart",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "catalog=cli.main:main",
        ],
    },
)
