# setup.py
from setuptools import setup, find_packages

setup(
    name="jolisp",
    version="0.1.0",
    description="Embeddable S-expression interpreter with closures and non-hygienic macros",
    packages=find_packages(include=["jolisp", "jolisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
