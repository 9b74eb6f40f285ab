"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Command line entry point for checking address literals and for self testing
               the validators against the fixture tables.

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

from typing import Optional, Tuple

import logging

import click

from mojo.ipliterals.exceptions import FixtureMismatchError, raise_for_fixture_failures
from mojo.ipliterals.fixtures import FIXTURE_TABLES
from mojo.ipliterals.harness import (
    ADDRESS_FAMILIES,
    VALIDATOR_FLAVORS,
    get_validator,
    render_report,
    run_fixture_table
)
from mojo.ipliterals.validation import is_valid_ipv4, is_valid_ipv6

logger = logging.getLogger()

EXIT_SUCCESS = 0
EXIT_INVALID = 1


@click.group("ipliterals")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def ipliterals_group(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    return


@ipliterals_group.command("check")
@click.option("--family", type=click.Choice(["ipv4", "ipv6", "any"]), default="any",
              show_default=True, help="The address family the candidates must belong to.")
@click.argument("candidates", nargs=-1, required=True)
def command_check(family: str, candidates: Tuple[str, ...]):
    """
        Checks each CANDIDATE and prints whether it is a valid address literal.
    """
    all_valid = True

    for candidate in candidates:
        if family == "ipv4":
            valid = is_valid_ipv4(candidate)
        elif family == "ipv6":
            valid = is_valid_ipv6(candidate)
        else:
            valid = is_valid_ipv4(candidate) or is_valid_ipv6(candidate)

        click.echo(f"{candidate} => {valid}")
        all_valid = all_valid and valid

    ctx = click.get_current_context()
    ctx.exit(EXIT_SUCCESS if all_valid else EXIT_INVALID)


@ipliterals_group.command("selftest")
@click.option("--family", type=click.Choice(ADDRESS_FAMILIES + ["all"]), default="all",
              show_default=True, help="The fixture tables to run.")
@click.option("--flavor", type=click.Choice(VALIDATOR_FLAVORS + ["all"]), default="native",
              show_default=True, help="The validators to run the fixture tables through.")
@click.option("--color/--no-color", default=None, help="Force or suppress colored output.")
@click.option("--strict", is_flag=True, default=False,
              help="Stop at the first fixture table with failures and report each failing fixture.")
def command_selftest(family: str, flavor: str, color: Optional[bool], strict: bool):
    """
        Runs the fixture tables through the validators and reports the results.
    """
    families = ADDRESS_FAMILIES if family == "all" else [family]
    flavors = VALIDATOR_FLAVORS if flavor == "all" else [flavor]

    all_passed = True

    for flav in flavors:
        for fam in families:
            name = f"{flav}: {fam.replace('ip', 'IP')}"
            report = run_fixture_table(name, FIXTURE_TABLES[fam], get_validator(fam, flav))
            render_report(report, color=color)
            logger.debug("Fixture run complete. table=%s passes=%d fails=%d", name, report.passes, report.fails)
            all_passed = all_passed and report.succeeded

            if strict:
                try:
                    raise_for_fixture_failures("Strict self test failed.", report, details={"flavor": flav, "family": fam})
                except FixtureMismatchError as fmerr:
                    raise click.ClickException(str(fmerr)) from fmerr

    ctx = click.get_current_context()
    ctx.exit(EXIT_SUCCESS if all_passed else EXIT_INVALID)


def main():
    ipliterals_group(auto_envvar_prefix="IPLITERALS")


if __name__ == "__main__":
    main()
