from setuptools import setup

setup(
    name='descent',
    version='0.1',
    description='package for least-squares regression and steepest descent using gradient methods',
    license='BSD',
    packages=['descent'],
    install_requires=[
        'numpy',
        'pandas',
        'matplotlib'
    ],
    extras_require={
        'test': ['pytest']
    },
    zip_safe=False
)
