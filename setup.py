from setuptools import setup

setup(
    name='quint',
    version='0.1',
    author='Lars-Dominik Braun',
    author_email='ldb@leibniz-psychology.org',
    packages=['quint'],
    description='Pronounceable 32 bit identifiers (proquints)',
    long_description=open('README.rst').read(),
    long_description_content_type='text/x-rst',
    install_requires=[
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
    entry_points={
    'console_scripts': [
            'quint = quint.cli:main',
            ],
    },
    classifiers = [
        'License :: OSI Approved :: MIT License',
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        ],
)
