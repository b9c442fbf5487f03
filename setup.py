from setuptools import find_packages, setup

setup(
    name="decoder-ring",
    version="0.1.0",
    description="Transcode stdin to stdout with named, reversible transforms",
    packages=find_packages(include=["decoder_ring", "decoder_ring.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework (0.26+ vendors its own click)
        "click",  # Binary stdio streams and usage errors (typer's base)
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and command output models
        "jinja2",  # Template rendering for usage text
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            # Primary CLI name
            "decoder-ring=decoder_ring.cli:main",
            # Same program, encoding by default
            "encoder-ring=decoder_ring.cli:main",
        ],
    },
)
