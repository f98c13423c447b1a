from setuptools import setup # type: ignore

setup(
    name="bimap",
    version="0.1",
    author="David Assefa Tofu",
    author_email="davidat@bu.edu",
    description="An immutable bidirectional map with lookups from either side.",
    license="Apache",
    packages=["bimap"],
    install_requires=[
        "typing_extensions>=3.7.4",
        "more-itertools>=8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "mypy>=1.0",
            "black>=23.1",
            "isort>=5.2.2",
        ]
    },
    python_requires=">=3.8.0",
)
