from pathlib import Path

from setuptools import find_packages, setup

# Check if Git is present before enabling setuptools_scm
version_kwargs = {'version': '0.1.0'}
git_root = Path(__file__).resolve().parent / '.git'
if git_root.exists():
    version_kwargs = {
        'use_scm_version': True,
        'setup_requires': ['setuptools_scm']
    }

setup(
    name='slimebot',
    **version_kwargs,
    description='Discord bot owning the guild spam channel schema',
    platforms='any',
    python_requires='>=3.8',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    package_data={
        'slimebot': ['db/migrations/*', 'db/migrations/**/*']
    },
    install_requires=[
        'discord.py>=2.0',
        'SQLAlchemy>=1.4',
        'alembic>=1.7',
        'dependency-injector>=4.0',
    ],
    extras_require={
        'tests': [
            'tox',
            'pytest',
            'pytest-asyncio',
            'pytest-mock',
        ]
    },
)
