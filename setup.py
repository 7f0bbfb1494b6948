from setuptools import setup

setup(
    name='heap_tools',
    author='Martin Privat',
    version='0.1.0',
    packages=['heap_tools','heap_tools.tests'],
    license='Creative Commons Attribution-Noncommercial-Share Alike license',
    description='binary heaps with min, max and custom orderings',
    long_description=open('README.md').read(),
    install_requires=[
        "numpy",
        "pandas",
        "seaborn",
        "tqdm",
        "matplotlib",
        "multiprocessing_logger @ git+https://github.com/ElTinmar/multiprocessing_logger.git@main",
    ],
    extras_require={
        "test": ["pytest"],
    }
)
