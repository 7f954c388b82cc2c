#!/usr/bin/env python
"""Setup script for scriptjson.

JSON codec for the value model of an embedded scripting runtime.
"""
from pathlib import Path
from setuptools import setup, find_packages

# 프로젝트 루트 디렉토리
here = Path(__file__).parent.resolve()

# README 읽기
long_description = (here / "README.md").read_text(encoding="utf-8")

# 버전 정보 읽기 (간단한 방법)
version = "0.1.0"

setup(
    name="scriptjson",
    version=version,
    author="YC Math",
    author_email="your-email@example.com",
    description="JSON encode/decode module for embedded script interpreter values",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ycmath/scriptjson",
    project_urls={
        "Bug Tracker": "https://github.com/ycmath/scriptjson/issues",
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="json lua scripting interpreter encoding",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    python_requires=">=3.8",

    # 기본 의존성
    install_requires=[
        "orjson>=3.8.0",
    ],

    # 선택적 의존성
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "hypothesis>=6.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },

    include_package_data=True,
    zip_safe=True,
)
