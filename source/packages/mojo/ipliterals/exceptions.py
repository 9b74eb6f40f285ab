"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised when a fixture table run does not produce
               the expected results.

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

from typing import TYPE_CHECKING, Optional

import os

if TYPE_CHECKING:
    from mojo.ipliterals.harness import FixtureReport


class FixtureMismatchError(RuntimeError):
    """
        This error is raised when a validator disagrees with the expected results of a fixture table.
    """
    def __init__(self, message, name, passes, fails, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.name = name
        self.passes = passes
        self.fails = fails
        return


def raise_for_fixture_failures(context: str, report: "FixtureReport", details: Optional[dict]=None):
    """
        Raises an :class:`FixtureMismatchError` if any fixture in the report failed.
    """

    if report.fails > 0:
        err_msg_lines = [
            context,
            "Fixture Failures: {} of {} for table: {}".format(
                report.fails, len(report.results), report.name)
        ]

        for result in report.results:
            if not result.passed:
                err_msg_lines.append("    {} => expected={} found={}".format(
                    result.display, result.expected, result.found))
                if result.error is not None:
                    err_msg_lines.append("        error: {}".format(result.error))

        if details is not None:
            for dkey, dval in details.items():
                err_msg_lines.append("    {}: {}".format(dkey, dval))

        errmsg = os.linesep.join(err_msg_lines)
        raise FixtureMismatchError(errmsg, report.name, report.passes, report.fails)

    return
