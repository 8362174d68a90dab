# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirschema",
    version="1.0.0",
    description="Expand indented .dir schema documents into directory trees and snapshot directories back into schemas",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirschema", "dirschema.*"]),
    package_data={"dirschema.interface": ["locales/*.json"]},
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # File picker and error dialogs
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirschema=dirschema.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
