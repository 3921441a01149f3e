from setuptools import setup, find_packages

setup(
    name="reversi-engine",
    version="0.2",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        'numpy>=1.19.0',
        'tqdm>=4.0.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['reversi=reversi.cli:main'],
    },
    python_requires='>=3.7',
)
