"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the grammars and group counts used when validating address literals.

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

import re

IPV4_OCTET_COUNT = 4

IPV6_GROUP_COUNT = 8

# A dotted quad suffix carries the last 32 bits of the address, two groups.
IPV6_IPV4_SUFFIX_GROUP_COUNT = 2

# The '::' must stand in for at least one group.
IPV6_MIN_COMPACTED_GROUPS = 1

IPV6_COMPONENT_SEPARATOR = ":"
IPV6_ZERO_ADDRESS = "::"

# Octets are written with the fewest digits possible, so '0' is the only octet
# allowed to start with a zero.
PATTERN_IPV4_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])"

REGEX_IPV4_ADDRESS = re.compile(r"{octet}(?:\.{octet}){{{repeat}}}".format(
    octet=PATTERN_IPV4_OCTET, repeat=IPV4_OCTET_COUNT - 1))

REGEX_IPV6_HEXTET = re.compile(r"[0-9A-Fa-f]{1,4}")
