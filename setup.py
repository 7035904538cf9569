from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="stix4taxii",
    description="STIX 2.1 objects and TAXII 2.1 resources built from reusable property groups",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/eclecticiq/stix4taxii/",
    author="EclecticIQ",
    author_email="chris@eclecticiq.com",
    version='0.0.1',
    license="GNU General Public License v3.0",
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.9',
    install_requires=[
        'pydantic>=2',
        'stix2',
        'taxii2-client',
        'python-slugify',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Topic :: Internet",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules"
    ]
)
