import setuptools

setuptools.setup(
    name = 'polylib',
    version = '1.0',
    description = 'polyline splitting and resampling tools',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires='>=3.6',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
