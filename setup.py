from setuptools import setup

setup(
    name='g1.timezones',
    description='Fixed-offset time zones',
    license='MIT',
    packages=[
        'g1.timezones',
    ],
    zip_safe=False,
)
