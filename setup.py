from setuptools import find_packages, setup

setup(
  name="edjubjub",
  version="0.1.0",
  description="EdDSA signatures on the BN256 twisted Edwards curve (BabyJubjub)",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["edjubjub", "edjubjub.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "cryptography>=35",
    "pynacl>=1.4",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(console_scripts=["edjubjub = edjubjub.cli.__main__:main"],),
)
