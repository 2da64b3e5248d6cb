from setuptools import setup, find_packages

setup(
    name="folder_backup",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "wcmatch==10.1"
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "folder_backup=folder_backup.main:main",
        ],
    },
)
