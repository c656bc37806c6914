# noxfile.py
from nox_poetry import Session, session

PY_VERSIONS = ["3.11", "3.12"]
SOURCES = ("src", "tests", "noxfile.py")


@session(python=PY_VERSIONS)
def format(session: Session) -> None:
    """Auto-format code."""
    session.install("black", "isort")
    session.run("isort", *SOURCES)
    session.run("black", *SOURCES)


@session(python=PY_VERSIONS)
def typecheck_mypy(session: Session) -> None:
    session.install("mypy", "pytest")
    session.install("pandas-stubs~=2.2")
    session.install(".")
    session.run("mypy", "--config-file", "pyproject.toml")


@session(python=PY_VERSIONS)
def lint(session: Session) -> None:
    """Static checks only; never rewrites files."""
    session.install("ruff", "black", "isort")
    session.run("ruff", "check", *SOURCES)
    session.run("isort", "--check-only", *SOURCES)
    session.run("black", "--check", *SOURCES)


@session(python=PY_VERSIONS)
def tests(session: Session) -> None:
    """Run the suite headless against the installed package."""
    session.install(".[test]")
    session.run("pytest", "-q", env={"MPLBACKEND": "Agg"})


@session(python=PY_VERSIONS[-1])
def demo(session: Session) -> None:
    """Classify the bundled demo catalog against the example roster JSON."""
    session.install(".")
    session.run("python", "src/example.py", "--option", "2", env={"MPLBACKEND": "Agg"})
