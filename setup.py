
from setuptools import setup, find_packages


setup(
    name="sha3sponge",
    version="0.0.1",
    description="Keccak sponge construction and SHA-3 fixed-length digests",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Topic :: Security :: Cryptography',
    ],
    packages=find_packages(where=".", exclude=["tests"]),
    python_requires=">=3.10, <4",
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    entry_points={
        "console_scripts": ["sha3sum=sha3sponge.__main__:run"],
    },
)
