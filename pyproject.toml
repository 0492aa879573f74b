[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metadeseq"
version = "0.1.0"
description = "Building blocks for metagenomic count analysis: k-mers, signatures, lineages, count tables, normalization and FASTQ input."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "metagenomics",
    "bioinformatics",
    "k-mer",
    "minhash",
    "normalization",
    "median-of-ratios",
    "fastq",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["metadeseq"]

[tool.pytest.ini_options]
addopts = "-ra"
