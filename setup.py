# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='folnf',
    version='0.1.0',
    author="folnf developers",
    description="Normal forms of first-order formulas in Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=['tests', 'tests.*']
    ),
    python_requires='>=3.12',
    install_requires=[
        'ipython',
        'typing_extensions'
    ],
    extras_require={
        'test': [
            'hypothesis',
            'pytest',
            'sympy'
        ]
    },
    entry_points={
        'console_scripts': ['folnf = folnf.__main__:main']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
)
