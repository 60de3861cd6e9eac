from setuptools import setup, find_packages

setup(
    name='emulated_devices',
    version='0.1',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'selenium',
        'selenium-stealth',
        'requests',
        'black',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'emulated-devices-gen=emulated_devices.gen:main',
        ],
    },
    description='Built-in device presets for Selenium mobile emulation, generated from puppeteer',
    author='TheAB',
    author_email='oscarbascon@gmail.com',
    url='https://github.com/TheAB1/ab-selenium-wrapper',
)
