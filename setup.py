import os

from setuptools import setup, find_packages

# Pull version from source without importing
# since we can't import something we haven't built yet :)

here = os.path.abspath(os.path.dirname(__file__))

__version__ = None
with open(os.path.join(here, 'kafka_assignor', 'version.py')) as f:
    exec(f.read())

with open(os.path.join(here, 'README.rst')) as f:
    README = f.read()

test_require = ['pytest', 'pytest-mock']

setup(
    name="kafka-assignor",
    version=__version__,
    python_requires=">=3.8",
    tests_require=test_require,
    extras_require={
        "test": test_require,
    },
    packages=find_packages(exclude=['test', 'test.*']),
    author="Dana Powers",
    author_email="dana.powers@gmail.com",
    license="Apache License 2.0",
    description="Deterministic partition assignment for Kafka consumer groups",
    long_description=README,
    keywords=[
        "apache kafka",
        "kafka",
        "consumer group",
        "partition assignment",
    ],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ]
)
