from setuptools import setup, find_packages

setup(
    name='litclock',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'litclock': ['data/*.csv'],
    },
    python_requires='>=3.8',
    install_requires=[
        'colored>=2.2.3',
        'halo>=0.0.31',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points='''
        [console_scripts]
        litclock=litclock.__main__:main
    ''',
    license='MIT',
    keywords='clock literature quotes terminal',
    description='A terminal clock that tells the time with quotations from literature',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
)
