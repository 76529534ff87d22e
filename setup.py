from setuptools import setup, find_namespace_packages

setup(
    name="krc2lrc",
    version="0.1.0",
    description="Convert encrypted KRC karaoke lyrics into time-synced LRC files",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    license="MIT",
    packages=find_namespace_packages(include=["krc2lrc", "krc2lrc.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "regex",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "ruff",
            "mypy",
        ]
    },
    entry_points={
        "console_scripts": [
            "krc2lrc=krc2lrc.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Text Processing",
        "Topic :: Utilities",
    ],
    keywords="lyrics krc lrc karaoke converter",
)
