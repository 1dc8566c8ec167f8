"""
Wavix Python SDK - Setup

Python client for the Wavix telephony API.
"""

from setuptools import setup, find_packages
import os
import re

# Read the README
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

# Read version without importing the package
with open(os.path.join(here, "wavix", "__init__.py"), encoding="utf-8") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)

setup(
    name="wavix",
    version=version,
    author="Wavix",
    description="Python SDK for the Wavix telephony API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/wavix/sdk-python",
    project_urls={
        "Documentation": "https://docs.wavix.com",
        "Bug Tracker": "https://github.com/wavix/sdk-python/issues",
    },
    packages=find_packages(include=["wavix", "wavix.*"]),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24.0",
        "websockets>=13.0",
        "pydantic[email]>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "pytest-cov>=4.0",
            "mypy>=1.0",
            "black>=23.0",
            "ruff>=0.0.270",
            "respx>=0.20",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Communications :: Telephony",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
    keywords=[
        "wavix",
        "telephony",
        "voice",
        "sms",
        "sip",
        "did",
        "e911",
        "2fa",
        "transcription",
    ],
    package_data={
        "wavix": ["py.typed"],
    },
    zip_safe=False,
)
