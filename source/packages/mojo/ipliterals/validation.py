"""
.. module:: validation
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for checking the text form of IPv4 and IPv6 addresses.

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

from typing import Any, List, Optional, Tuple

from mojo.ipliterals.constants import (
    IPV6_COMPONENT_SEPARATOR,
    IPV6_GROUP_COUNT,
    IPV6_IPV4_SUFFIX_GROUP_COUNT,
    IPV6_MIN_COMPACTED_GROUPS,
    IPV6_ZERO_ADDRESS,
    REGEX_IPV4_ADDRESS,
    REGEX_IPV6_HEXTET
)


def is_valid_ipv4(candidate: Any) -> bool:
    """
        Checks to see if 'candidate' is an IPv4 dotted quad address literal.

        :param candidate: The value that is to be checked.  Any value that is not a string
                          is rejected.

        :returns: A boolean indicating if the candidate is a valid IPv4 address literal.
    """
    is_ipv4 = False

    if isinstance(candidate, str):
        is_ipv4 = REGEX_IPV4_ADDRESS.fullmatch(candidate) is not None

    return is_ipv4


def is_ipv6_hextet(component: str) -> bool:
    """
        Checks to see if 'component' is a group of 1 to 4 hex digits.
    """
    return REGEX_IPV6_HEXTET.fullmatch(component) is not None


def split_ipv6_components(candidate: str) -> Tuple[List[str], Optional[List[str]]]:
    """
        Splits an IPv6 address literal into its colon separated components and locates
        the '::' compaction point if there is one.

        :param candidate: The address literal to split.

        :returns: A tuple of (leading, trailing).  When the literal is in full form the
                  leading list holds every component and trailing is None.  When the
                  literal is compacted, leading holds the components before the '::' and
                  trailing holds the components after it.
    """
    components = candidate.split(IPV6_COMPONENT_SEPARATOR)

    # A leading or trailing '::' leaves an extra empty component at that end.
    if len(components) > 0 and components[0] == "":
        components = components[1:]
    if len(components) > 0 and components[-1] == "":
        components = components[:-1]

    leading = components
    trailing = None

    if "" in components:
        sep = components.index("")
        leading = components[:sep]
        trailing = components[sep + 1:]

    return leading, trailing


def count_ipv6_groups(components: List[str]) -> Optional[int]:
    """
        Counts the 16 bit groups represented by a run of components.  The last component
        may be an IPv4 dotted quad, which stands for two groups.

        :param components: The components to count.

        :returns: The number of groups represented or None if any component is malformed.
    """
    group_count = None

    hextets = components
    suffix_groups = 0

    if len(components) > 0 and is_valid_ipv4(components[-1]):
        hextets = components[:-1]
        suffix_groups = IPV6_IPV4_SUFFIX_GROUP_COUNT

    if all(is_ipv6_hextet(hx) for hx in hextets):
        group_count = len(hextets) + suffix_groups

    return group_count


def is_valid_full_ipv6(components: List[str]) -> bool:
    """
        Checks that the components of an uncompacted IPv6 address are either eight hextets
        or six hextets followed by an IPv4 dotted quad.
    """
    group_count = count_ipv6_groups(components)
    return group_count == IPV6_GROUP_COUNT


def is_valid_compact_ipv6(leading: List[str], trailing: List[str]) -> bool:
    """
        Checks the components on either side of a '::' compaction point.

        :param leading: The components found before the '::'.
        :param trailing: The components found after the '::'.  Only this side can end
                         with an IPv4 dotted quad.

        :returns: A boolean indicating if the components leave room for at least one
                  compacted group.
    """
    is_valid = False

    if all(is_ipv6_hextet(hx) for hx in leading):
        trailing_count = count_ipv6_groups(trailing)
        if trailing_count is not None:
            group_count = len(leading) + trailing_count + IPV6_MIN_COMPACTED_GROUPS
            is_valid = group_count <= IPV6_GROUP_COUNT

    return is_valid


def is_valid_ipv6(candidate: Any) -> bool:
    """
        Checks to see if 'candidate' is an IPv6 address literal in full or compact form,
        optionally ending with an embedded IPv4 dotted quad.

        :param candidate: The value that is to be checked.  Any value that is not a string
                          is rejected.

        :returns: A boolean indicating if the candidate is a valid IPv6 address literal.
    """
    is_ipv6 = False

    if not isinstance(candidate, str):
        is_ipv6 = False

    elif candidate == IPV6_ZERO_ADDRESS:
        is_ipv6 = True

    else:
        leading, trailing = split_ipv6_components(candidate)
        if trailing is None:
            is_ipv6 = is_valid_full_ipv6(leading)
        else:
            is_ipv6 = is_valid_compact_ipv6(leading, trailing)

    return is_ipv6
