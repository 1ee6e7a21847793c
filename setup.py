# setup.py
from setuptools import setup, find_packages

setup(
    name="lssuppress",
    version="1.0.0",
    description="Condenses recursive directory listings (ls -R) for agent tool hooks",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "tiktoken",  # Token savings estimation
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'lssuppress=lssuppress.interface.cli.app:main',
            'lssuppress-hook=lssuppress.interface.hook.runner:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
