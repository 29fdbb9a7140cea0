import re
from pathlib import Path

from setuptools import setup

install_requires = [
    "httpx>=0.27,<0.28",
    "multidict>=4.5,<7.0",
    "yarl>=1.0,<2.0",
]

tests_require = [
    "pytest>=7.0",
    "pytest-httpbin>=2.0",
]


def read(*parts):
    return Path(__file__).resolve().parent.joinpath(*parts).read_text().strip()


def read_version():
    regexp = re.compile(r"^__version__\W*=\W*\"([\d.abrc]+)\"")
    for line in read("easy_request", "__version__.py").splitlines():
        match = regexp.match(line)
        if match is not None:
            return match.group(1)
    else:
        raise RuntimeError("Cannot find version in easy_request/__version__.py")


with open("README.md", "r") as fh:
    long_description = fh.read()


setup(
    name="easy-request",
    version=read_version(),
    description="Requests with sane defaults on top of httpx",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["macOS", "POSIX", "Windows"],
    python_requires=">=3.11",
    project_urls={},
    license="MIT",
    packages=["easy_request"],
    package_dir={"easy_request": "./easy_request"},
    package_data={"easy_request": ["py.typed"]},
    install_requires=install_requires,
    extras_require={"test": tests_require},
    include_package_data=True,
)
