import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def read_file_contents(path):
    import codecs

    with codecs.open(path, encoding="utf-8") as f:
        return f.read()


EXTRA_REQUIRES = dict(
    develop=[
        # Linting, according to PEP8
        'flake8>=3.8.3',

        # Type checker
        'mypy>=0.780',

        # Testing
        'pytest>=6.0.1'
    ]
)
setup(
    name='macaddress',
    version='0.1.0',
    packages=find_packages(exclude=["tests", "tests.*"]),
    data_files=[
        ("config", ["config/defaults.ini", "config/logging.ini"])
    ],
    license='MIT License',

    description='Represent and parse IEEE EUI-48 (MAC) addresses',
    long_description=read_file_contents(os.path.join(here, "README.md")),
    long_description_content_type="text/markdown",

    entry_points={
             'console_scripts': [
                 'macaddress-demo = macaddress.tools.demo:main',
                 'macaddress-shell = macaddress.tools.shell:main'
             ]},
    python_requires='>=3.8',
    install_requires=[
        'hexdump>=3.3',
        'msgpack>=1.0.0',
        'pyformance>=0.4',
        'cmd2>=2.1.2,<3'
    ],
    extras_require=EXTRA_REQUIRES
)
