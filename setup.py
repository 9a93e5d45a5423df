from setuptools import find_packages, setup

VERSION = '0.1.0'


def parse_md_readme():
    try:
        with open('README.md') as fh:
            return fh.read()
    except OSError:
        return ''


TEST_REQS = [
    'coverage>=4.2',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'colour',
    'matplotlib>=3.3',
    'mavis_config>=1.1.0',
    'numpy>=1.13.1',
    'pandas>=1.1',
]

DEPLOY_REQS = ['twine', 'wheel']


setup(
    name='splitcov',
    version='{}'.format(VERSION),
    package_dir={'': 'src'},
    packages=find_packages(where='src', exclude=['tests']),
    description='Reduce and plot per-sample split coverage tables',
    long_description=parse_md_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS + DEPLOY_REQS,
        'deploy': DEPLOY_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.7',
    test_suite='tests',
    entry_points={'console_scripts': ['splitcov = splitcov.main:main']},
)
