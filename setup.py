from setuptools import setup

setup(
    name='DailyGitLog',
    version='1.0.0',
    description='Daily commit log pusher with streak statistics',
    python_requires='>=3.8',
    packages=['core', 'app'],
    py_modules=['desktop_app', 'ui_styles'],
    install_requires=[
        'PySide6',
        'requests',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'gui_scripts': ['dailygitlog = desktop_app:main'],
    },
)
