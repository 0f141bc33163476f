from setuptools import find_packages, setup

try:
    import pypandoc

    long_description = pypandoc.convert_file("README.md", "rst", "md")
except (IOError, ImportError):
    long_description = open("README.md").read()

setup(
    name="rangemap",
    version="0.1.0",
    packages=find_packages(exclude=["contrib", "docs", "tests", "tests.*"]),
    include_package_data=True,
    license="MIT License",
    description="Interval-tree backed range remapping through chained tables",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    install_requires=["typing_extensions"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    extras_require={"test": ["pytest", "pydash"]},
    entry_points={"console_scripts": ["rangemap=rangemap.__main__:main"]},
)
