from glob import glob
from setuptools import setup


setup(
    name='infixsim',
    use_scm_version={
        # Not every checkout is a git repository.
        'fallback_version': '0.1.0',
    },
    description='Step by step infix to postfix converter',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['infixsim'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'bandit',
            'mypy',
            'safety',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
