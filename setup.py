from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="safestrings",
    version="1.0.0",
    packages=find_packages(include=["safestrings", "safestrings.*"]),
    install_requires=[
        "cryptography>=41.0.0",
    ],
    entry_points={
        "console_scripts": [
            "safestrings=safestrings.main:main",
        ],
    },
    python_requires=">=3.10",
    description="Encrypt the secrets in your configuration files with a password.",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
