from setuptools import setup, find_packages

setup(
    name="blurpreview",
    version="0.1.0",
    description="BlurHash placeholder decoding - instant low-fidelity image previews",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "Pillow>=9.0.0",
        "flask>=2.0.0",
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "blurpreview=blurpreview.cli:main",
        ],
    },
    python_requires=">=3.7",
)
