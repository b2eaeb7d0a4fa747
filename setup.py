from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pycoherent",
    version="0.1.0",
    description="Coherent noise generation with composable noise modules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pycoherent", "pycoherent.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Visualization",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="noise perlin voronoi procedural terrain texture",
    entry_points={
        "console_scripts": [
            "pcn-build=pycoherent.cli.build_commands:build_noise_map",
        ],
    },
)
