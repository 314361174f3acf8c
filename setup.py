# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="scopeval",
    version="0.1.0",
    description="Scoped evaluation of structured expressions against an explicit binding context",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["scopeval", "scopeval.*"]),
    package_data={"scopeval": ["prelude/*.clj"]},
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
