import nox

# If a package is not installed in the virtualenv, raise an error
# (default is False and the package is loaded from the system)
nox.options.error_on_external_run = True


def print_installed_package_version(
    session: nox.Session, package_name: str
) -> None:
    pip_list: str = session.run("pip", "list", silent=True)
    for line in pip_list.split("\n"):
        if package_name in line:
            session.log(line)


@nox.session(python=["3.10", "3.11", "3.12"])
def tests(session: nox.Session) -> None:
    """Run the tests."""
    session.install("-r", "requirements_dev.txt")
    session.install(".")
    print_installed_package_version(session, "beartype")
    session.run("pytest", *session.posargs)


@nox.session(python=["3.11"])
def tests_torch(session: nox.Session) -> None:
    """Run the tests with the optional torch dependency installed.

    The CPU version of pytorch is a much smaller download than the default
    `torch` package hosted on pypi.
    """
    session.install(
        "torch", "--extra-index-url", "https://download.pytorch.org/whl/cpu"
    )
    session.install("-r", "requirements_dev.txt")
    session.install(".")
    print_installed_package_version(session, "torch")
    session.run("pytest", *session.posargs)


@nox.session(python=["3.11"])
def precommit(session: nox.Session) -> None:
    """Run the pre-commit hooks."""
    session.install("-r", "requirements_dev.txt")
    session.run("pre-commit", "run", "--all-files")
