from setuptools import setup

name = 'bgkpy'
version = '0.1'
release = version + '.0'
author = 'Thomas Sasse'

setup(
    name=name,
    version=release,
    description='Finite Volume Solver for BGK-type Kinetic Models',
    author=author,
    author_email='thomas.sasse@tu-ilmenau.de',
    url='https://github.com/Thosse/BoltzPy',
    license='Apache Software License',
    packages=['bgkpy', 'bgkpy.helpers'],
    python_requires='>=3.8',
    install_requires=['numpy',
                      'scipy',
                      'h5py'],
    extras_require={'test': ['pytest']},
)
