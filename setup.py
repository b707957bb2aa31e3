from setuptools import setup, find_packages

setup(
    name="tri-intersect",
    version="0.1.0",
    description="Orientation-based intersection test for pairs of triangles in 3D space",
    author="",
    packages=find_packages(exclude=["tests"]),
    py_modules=["triangle_intersect"],
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "matplotlib",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
