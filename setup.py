from setuptools import setup, find_packages

setup(
    name="neuroevo",
    version="0.1.0",
    packages=find_packages(include=["neuroevo", "neuroevo.*"]),
    python_requires=">=3.9",
    install_requires=[
        # System
        'python-dotenv',

        # Data Handling
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'pytest-mock>=3.10.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'neuroevo = neuroevo.cli.main:main',
        ],
    },
    include_package_data=True,
    description="Genetic algorithm neuroevolution of three-layer feed-forward networks",
)
