from setuptools import setup, find_packages

setup(
    name="tabulation",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"tabulation": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "matplotlib",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "render_table=tools.render_table:main",
        ]
    },
)
