from glob import glob
from setuptools import setup


setup(
    name='infix',
    use_scm_version={
        # Building outside a git checkout still needs a version.
        'fallback_version': '0.1.0',
    },
    description='Infix arithmetic calculator',
    install_requires=[
        'regex',
        'prompt_toolkit>=3.0.29',
    ],
    packages=['infix'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    tests_require=[
        'pytest',
        'pytest-cov',
        'coverage',
        'flake8',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
