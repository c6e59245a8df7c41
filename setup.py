from setuptools import setup, find_packages

setup(
    name="mimesig",
    version="0.1.0",
    description="Identify MIME types from magic number signatures and file extensions",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "mcp[cli]>=1.6.0,<2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mimesig-mcp=mimesig:main',
        ],
    },
    python_requires=">=3.11",
)
