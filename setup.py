from setuptools import setup, find_packages

__version__ = '1.0.0'

requirements = [
    'coloredlogs>=15.0',
    'pymongo>=4.0',
    'iso8601>=1.0',
    'h5py>=3.0',
]

test_requirements = [
    'pytest',
]

setup(
    name='votingorg',
    version=__version__,
    description='Single election voting registry: registration, approval, time boxed voting and tallies.',
    packages=find_packages(include=['votingorg', 'votingorg.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
