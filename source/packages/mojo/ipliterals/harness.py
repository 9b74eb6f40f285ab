"""
.. module:: harness
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the fixture runner used to exercise the address literal validators
               against tables of expected results.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import Any, Callable, Dict, List, Optional, Tuple

import logging

import click

from mojo.errors.exceptions import SemanticError

from mojo.ipliterals.reference import reference_ipv4, reference_ipv6
from mojo.ipliterals.validation import is_valid_ipv4, is_valid_ipv6

logger = logging.getLogger()

AddressCheck = Callable[[Any], bool]

VALIDATOR_TABLE: Dict[Tuple[str, str], AddressCheck] = {
    ("ipv4", "native"): is_valid_ipv4,
    ("ipv6", "native"): is_valid_ipv6,
    ("ipv4", "reference"): reference_ipv4,
    ("ipv6", "reference"): reference_ipv6,
}

ADDRESS_FAMILIES = ["ipv4", "ipv6"]
VALIDATOR_FLAVORS = ["native", "reference"]

PASS_MARK = "✅"
FAIL_MARK = "❌"


def get_validator(family: str, flavor: str = "native") -> AddressCheck:
    """
        Looks up the validator for an address family.

        :param family: The address family, 'ipv4' or 'ipv6'.
        :param flavor: Either 'native' for the validators in this package or 'reference' for
                       the validators backed by the standard library.

        :returns: The validator callable.
    """
    key = (family, flavor)
    if key not in VALIDATOR_TABLE:
        errmsg = f"Unknown validator requested. family={family} flavor={flavor}"
        raise SemanticError(errmsg)

    return VALIDATOR_TABLE[key]


def describe_candidate(value: Any) -> str:
    """
        Returns the display form of a fixture candidate.
    """
    return repr(value)


class FixtureResult:
    """
        The outcome of checking a single fixture candidate.
    """

    def __init__(self, candidate: Any, expected: bool, found: bool, error: Optional[str] = None):
        self._candidate = candidate
        self._expected = expected
        self._found = found
        self._error = error
        return

    @property
    def candidate(self) -> Any:
        return self._candidate

    @property
    def display(self) -> str:
        return describe_candidate(self._candidate)

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def expected(self) -> bool:
        return self._expected

    @property
    def found(self) -> bool:
        return self._found

    @property
    def passed(self) -> bool:
        return self._error is None and self._found == self._expected


class FixtureReport:
    """
        The results of running a table of fixtures through a validator.
    """

    def __init__(self, name: str, results: List[FixtureResult]):
        self._name = name
        self._results = results
        return

    @property
    def name(self) -> str:
        return self._name

    @property
    def results(self) -> List[FixtureResult]:
        return self._results

    @property
    def passes(self) -> int:
        return len([r for r in self._results if r.passed])

    @property
    def fails(self) -> int:
        return len(self._results) - self.passes

    @property
    def succeeded(self) -> bool:
        return self.fails == 0


def run_fixture_table(name: str, table: List[Tuple[Any, bool]], check: AddressCheck) -> FixtureReport:
    """
        Runs every fixture in 'table' through 'check' and collects the results.  An exception
        raised by the validator is recorded as a failure of that fixture.

        :param name: The name to give the report.
        :param table: A list of (candidate, expected) tuples.
        :param check: The validator to run.

        :returns: A :class:`FixtureReport` with a result for each fixture.
    """
    results = []

    for candidate, expected in table:
        try:
            found = check(candidate)
            result = FixtureResult(candidate, expected, found)
        except Exception as xcpt: # pylint: disable=broad-except
            logger.exception("Validator raised for fixture. table=%s candidate=%r", name, candidate)
            result = FixtureResult(candidate, expected, False, error=str(xcpt))

        logger.debug("table=%s candidate=%r expected=%r found=%r", name, candidate, expected, result.found)
        results.append(result)

    return FixtureReport(name, results)


def render_report(report: FixtureReport, color: Optional[bool] = None):
    """
        Writes a line for each fixture result followed by a summary line.
    """

    click.echo(click.style(f"=== {report.name} ===", fg="bright_white"), color=color)

    for result in report.results:
        if result.passed:
            value_fg = "bright_white" if result.found else "white"
            found_fg = "bright_green" if result.found else "bright_red"
            line = " ".join([
                PASS_MARK,
                click.style(result.display, fg=value_fg),
                "=>",
                click.style(str(result.found), fg=found_fg)
            ])
        else:
            line = " ".join([
                FAIL_MARK,
                click.style(f"{result.display} => {result.found}", fg="bright_red")
            ])
            if result.error is not None:
                line += " " + click.style(f"({result.error})", fg="red")

        click.echo(line, color=color)

    if report.succeeded:
        summary = " ".join([
            click.style(f"{report.passes} pass", fg="bright_green"),
            f"{report.fails} fail"
        ])
    else:
        summary = " ".join([
            f"{report.passes} pass",
            click.style(f"{report.fails} fail", fg="bright_red")
        ])

    click.echo(summary, color=color)

    return
