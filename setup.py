"""
Tak ルールエンジンのセットアップスクリプト
"""

from setuptools import setup, find_packages

setup(
    name="tak-engine",
    version="1.0.0",
    description="Tak - 石を積み上げて道をつなぐボードゲームのルールエンジン",
    author="",
    packages=find_packages(include=["tak", "tak.*"]),
    package_dir={"": "."},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.11.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
)
