from setuptools import setup, find_packages

setup(
    name="record-validator",
    version="0.1.0",
    description="Declarative, concurrent field validation for Python dataclasses",
    author="Jude Payne",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        'record_validator': ['default-config.yaml'],
    },
    include_package_data=True,
    install_requires=[
        'pyyaml>=6.0',
        'jsonschema>=4.17.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
)
