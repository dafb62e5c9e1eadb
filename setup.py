from pathlib import Path

from setuptools import find_packages, setup


def read_requirements(path: Path) -> list[str]:
    """Read a requirements file.

    Parameters
    ----------
    path
        The path to the requirements file.

    Raises
    ------
    FileNotFoundError
        If the requirements file is not found.
    """
    if not path.exists():
        msg = f"{path} not found"
        raise FileNotFoundError(msg)

    lines = path.read_text().splitlines()
    return [
        line.strip()
        for line in lines
        if line.strip() and not line.strip().startswith(("#", "-"))
    ]


here = Path(__file__).parent

# Setup the package
setup(
    name="deodorant",
    version="0.1.0",
    description="Runtime type checking for plain Python functions",
    long_description=(here / "README.md").read_text(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=read_requirements(here / "requirements.txt"),
    extras_require={
        "test": read_requirements(here / "requirements_dev.txt"),
        "torch": ["torch"],
    },
    zip_safe=False,
)
