from setuptools import setup, find_packages

with open('README.md') as fd:
    long_description = fd.read()

setup(
    name='disposable-mixin',
    version='1.0.1',
    description='Mixin that brings Disposable implementation to your types',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    packages=find_packages(exclude=['tests', 'tests.*']),
    zip_safe=True,
    python_requires='>=3.8',
    extras_require={
        'reactivex': {'reactivex >= 4.0.0'},
        'test': {'pytest >= 7.0.0', 'reactivex >= 4.0.0'}
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ])
