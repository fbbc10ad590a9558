from setuptools import setup, find_packages

setup(
    name="css-import-resolver",
    version="1.0.0",
    packages=find_packages(include=['css_import_resolver', 'css_import_resolver.*']),
    install_requires=[
        'cssutils',
        'requests',
        'chardet',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'pytest-cov',
        ],
    },
    entry_points={
        'console_scripts': [
            'css-import-resolver=css_import_resolver.cli:main',
        ],
    },
    python_requires='>=3.8',
    author="Kenneth Hanks",
    author_email="fourfigs@gmail.com",
    description="Resolve stylesheets and their @import rules into cascade-ordered fragments",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
