from setuptools import setup, find_packages
setup(
    name="vtc-registry",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "requests",
        "beautifulsoup4",
        "soupsieve",
        "fastapi<0.137",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest", "httpx"],
    },
    entry_points={
        'console_scripts': [
            'vtc-registry=vtc_registry.__main__:_safe_main'
        ]
    }
)
