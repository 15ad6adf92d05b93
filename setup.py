from setuptools import setup, find_packages

setup(
    name="nasr_sct",
    version="0.1.0",
    packages=find_packages(include=["nasr_sct", "nasr_sct.*"]),
    install_requires=[
        "requests>=2.25.1",
        "pandas>=1.2.0",
        "python-dateutil>=2.8.1",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "nasr-sct=nasr_sct.cli:main",
        ]
    },
    description="Extract airports, navaids and fixes from FAA NASR data into VRC sector files",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
