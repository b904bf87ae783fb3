import nox

nox.options.sessions = ["lint", "format", "type_hints", "smoke_tests"]


@nox.session(reuse_venv=True, python="3.9")
def lint(session: nox.Session) -> None:
    """ruff check of BrightStars and its tests"""
    session.install("ruff==0.4.8")
    session.run("ruff", "check", "--fix")


@nox.session(reuse_venv=True, python="3.9")
def format(session: nox.Session) -> None:
    session.install("ruff==0.4.8")
    session.run("ruff", "format")


@nox.session(reuse_venv=True, python="3.9")
def type_hints(session: nox.Session) -> None:
    """mypy over the BrightStars package"""
    session.install("-e", "..[test]")
    session.install("mypy")
    session.run("mypy", "--install-types", "--non-interactive", "BrightStars")


@nox.session(reuse_venv=True, python="3.9")
def unit_tests(session: nox.Session) -> None:
    """
    Decoder, loader, lookup and config tests against the synthetic
    catalog lines in tests/catalog_test_utils.py
    """
    session.install("-e", "..[test]")
    session.run("pytest", "-m", "unit", "tests")


@nox.session(reuse_venv=True, python="3.9")
def smoke_tests(session: nox.Session) -> None:
    """The brightstars command line run over the fixture catalogs"""
    session.install("-e", "..[test]")
    session.run("pytest", "-m", "smoke", "tests")
