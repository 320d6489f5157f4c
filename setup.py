# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletXr pulls in a matching Flet; if the resolver picks an old pair use:
    # uv pip install FletXr[dev] --pre
    "flet",
    "FletXr",

    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",

    # --- TESTS---
    "pytest-asyncio==1.3.0",
    "pytest"
]

setup(
    name="Serenemind",
    version="0.1.0",
    description="Serenemind anger journal and breathing companion",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"serenemind.shared.config": ["settings/*.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    python_requires=">=3.12",
)
