import subprocess
import sys

SOURCES = ["src", "tests"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_cli_tests():
    subprocess.run(["pytest", "tests/integration", "--run-cli-tests"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", *SOURCES], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src/dirtools"], check=True)


def run_format():
    subprocess.run(["black", *SOURCES], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=dirtools", "--cov-report=term-missing", "--cov-report=xml"], check=True)


def run_checks():
    run_format()
    run_lint()
    run_typecheck()
    run_tests()


if __name__ == "__main__":
    globals()[sys.argv[1]]()
