from setuptools import setup

def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='connect_four_engine',
    version='0.1.0',
    keywords='connect four game engine rules cli',
    description='A Connect Four rules engine with turn management, win/tie detection and a simple two player CLI.',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
    'Development Status :: 4 - Beta',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3.9',
    'Topic :: Games/Entertainment :: Puzzle Games',
    ],
    license='MIT',
    python_requires='>=3.9',
    packages=[
        'connect_four_engine'
    ],
    install_requires=[
        'codetiming',
    ],
    extras_require={
        'test': ['pytest'],
    },
    scripts=['bin/c4'],
    include_package_data=True,
    zip_safe=False)
