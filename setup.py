# setup.py
from setuptools import setup, find_packages

setup(
    name="gittree",
    version="1.0.0",
    description="Convierte listados planos de árboles git en un árbol de ficheros anidado",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'gittree=gittree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
