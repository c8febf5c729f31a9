from setuptools import setup, find_packages

with open("README.md", "r") as file:
    long_description = file.read()

setup(
    name="spotbus",
    version="0.0.1",
    author="",
    author_email="",
    description="List Spotify playback devices and reach a local spotifyd over D-Bus from the command line.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    install_requires=["Click", "requests", "python-dotenv", "pydantic>=2"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["spotbus=spotbus.cli:spotbus"]},
)
