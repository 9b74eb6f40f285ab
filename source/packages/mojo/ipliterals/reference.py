"""
.. module:: reference
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains reference validators backed by the standard library 'ipaddress' module
               that are used to compare results against the native validators.

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

from typing import Any

import ipaddress


def reference_ipv4(candidate: Any) -> bool:
    """
        Checks 'candidate' with :class:`ipaddress.IPv4Address`.  The address classes also
        accept integers and packed bytes, so anything that is not a string is rejected first.
    """
    is_ipv4 = False

    if isinstance(candidate, str):
        try:
            ipaddress.IPv4Address(candidate)
            is_ipv4 = True
        except ValueError:
            is_ipv4 = False

    return is_ipv4


def reference_ipv6(candidate: Any) -> bool:
    """
        Checks 'candidate' with :class:`ipaddress.IPv6Address`.
    """
    is_ipv6 = False

    if isinstance(candidate, str):
        try:
            ipaddress.IPv6Address(candidate)
            is_ipv6 = True
        except ValueError:
            is_ipv6 = False

    return is_ipv6
