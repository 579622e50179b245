from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="geoidentity",
    version="0.0.1",
    author="Peter Cotton",
    author_email="",
    description="Country and subdivision resolution by code, name and attribute",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/geoidentity",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'geoidentity': [
            'geoconfig.yaml',
            'data/countries/*.yaml',
            'data/subdivisions/*.yaml',
            'data/*.py',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "pyyaml>=5.4",
        "pycountry>=22.3.5",
        "Unidecode>=1.3.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
