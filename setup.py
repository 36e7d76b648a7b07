from setuptools import setup, find_packages

setup(
    name="torch-thinfilm",
    version="1.0.0",
    description="Characteristic-matrix optics of planar thin-film stacks with PyTorch",
    packages=find_packages(include=["torch_thinfilm", "torch_thinfilm.*"]),
    python_requires=">=3.9",
    install_requires=[
        "torch>=2.0",  # PyTorch version requirement
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "numpy>=1.22",
        ],
    },
)
