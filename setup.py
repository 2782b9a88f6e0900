from setuptools import setup, find_packages

setup(
    name="optscan",
    version="0.1.0",
    description="POSIX getopt / getopt_long compatible option scanner.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "python-json-logger>=3.1",
        "pydantic>=2",
        "pyyaml",
        "toml",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["optscan=optscan.__main__:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
