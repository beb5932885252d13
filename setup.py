from setuptools import find_packages, setup

setup(
  name="decafsig",
  version="0.1.0",
  author="Decafsig",
  description="Hedged Schnorr signatures on decaf448 with constant-time scalar arithmetic",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests", "tests.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "blake3>=0.3",
    "colorama>=0.4",
    "rlp>=3.0",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(
    console_scripts=["decafsig = decafsig.__main__:main"],
  ),
)
