"""
.. module:: fixtures
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the tables of candidate values and expected results used to self test
               the address literal validators.

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

from typing import Any, Dict, List, Tuple

Fixture = Tuple[Any, bool]

WRONG_TYPE_FIXTURES: List[Fixture] = [
    (True, False),
    (False, False),
    (None, False),
    ({}, False),
    ([], False),
    (object(), False),
    (0, False),
    (0.0, False),
    (b"::", False),
]

IPV6_FIXTURES: List[Fixture] = WRONG_TYPE_FIXTURES + [
    # Invalid, not even close
    ("", False),
    ("def not valid", False),
    # Invalid, too many colons
    (":::", False),
    ("FF:::", False),
    (":::FF", False),
    # Invalid, more than one compaction
    ("11::22::33", False),
    ("::11::", False),
    ("11::22::", False),
    # Invalid, not enough parts
    ("FF:FF:FF:FF", False),
    ("FF:FF:FF:FF:192.168.0.1", False),
    ("11:22:33:44:55:66:77", False),
    # Invalid, too many parts
    ("11:22:33:44:55:66:77:88:99", False),
    ("11:22:33:44:55:66:77:88::", False),
    ("::88:99:AA:BB:CC:DD:EE:FF", False),
    ("11:22:33:44:55:66::192.168.0.1", False),
    ("::AA:BB:CC:DD:EE:FF:192.168.0.1", False),
    # Invalid, bad pairs
    ("G111:22:33:44:55:66:77:88", False),
    ("88:99:AA:BB:CC:DD:EE:7FFFF", False),
    ("11:22:33:44:55:66:77: 88", False),
    # Invalid, bad IPv4 suffix
    ("::192.168.0.259", False),
    ("11:22:33:44:55:66:192.168.00.1", False),
    ("192.168.0.1::", False),
    # Valid, zero address
    ("::", True),
    # Valid, full form
    ("11:22:33:44:55:66:77:88", True),
    ("ffff:FFFF:abcd:ABCD:0:00:000:0000", True),
    ("11:22:33:44:55:66:192.168.0.1", True),
    # Valid, zero leading IPv4
    ("::192.168.0.4", True),
    # Valid, trailing zero
    ("11::", True),
    ("11:22::", True),
    ("11:22:33::", True),
    ("11:22:33:44::", True),
    ("11:22:33:44:55::", True),
    ("11:22:33:44:55:66::", True),
    ("11:22:33:44:55:66:77::", True),
    # Valid, leading zero, with hex digit checks.
    ("::FF", True),
    ("::EE:FF", True),
    ("::DD:EE:FF", True),
    ("::CC:DD:EE:FF", True),
    ("::BB:CC:DD:EE:FF", True),
    ("::AA:BB:CC:DD:EE:FF", True),
    ("::99:AA:BB:CC:DD:EE:FF", True),
    # Valid, IPv4 with trailing zero
    ("11::192.168.0.1", True),
    ("11:22::192.168.0.1", True),
    ("11:22:33::192.168.0.1", True),
    ("11:22:33:44::192.168.0.1", True),
    ("11:22:33:44:55::192.168.0.1", True),
    # Valid, IPv4 with leading zero
    ("::FF:192.168.0.1", True),
    ("::EE:FF:192.168.0.1", True),
    ("::DD:EE:FF:192.168.0.1", True),
    ("::CC:DD:EE:FF:192.168.0.1", True),
    ("::BB:CC:DD:EE:FF:192.168.0.1", True),
    # Valid, compact, with hex length checks.
    ("1::333:4444:55:66:77:88", True),
    ("1:22::4444:55:66:77:88", True),
    ("1:22:333::55:66:77:88", True),
    ("1:22:333:4444::66:77:88", True),
    ("1:22:333:4444:55::77:88", True),
    ("1:22:333:4444:55:66::88", True),
    ("11::33:44:55:66:77", True),
    ("11:22::44:55:66:77", True),
    ("11:22:33::55:66:77", True),
    ("11:22:33:44::66:77", True),
    ("11:22:33:44:55::77", True),
    ("11::33:44:55:66", True),
    ("11:22::44:55:66", True),
    ("11:22:33::55:66", True),
    ("11:22:33:44::66", True),
    ("11::33:44:55", True),
    ("11:22::44:55", True),
    ("11:22:33::55", True),
    ("11::33:44", True),
    ("11:22::44", True),
    ("11::33", True),
    # Valid, compact IPv4, zero pair check.
    ("11::33:44:0:66:192.168.0.3", True),
    ("11:22::44:0:66:192.168.0.3", True),
    ("11:22:33::0:66:192.168.0.3", True),
    ("11:22:33:44::66:192.168.0.3", True),
    ("11::33:44:00:192.168.0.3", True),
    ("11:22::44:00:192.168.0.3", True),
    ("11:22:33::00:192.168.0.3", True),
    ("11::33:44:192.168.0.3", True),
    ("11:22::44:192.168.0.3", True),
    ("11::33:192.168.0.3", True),
]

IPV4_FIXTURES: List[Fixture] = WRONG_TYPE_FIXTURES + [
    # Fail, not even close
    ("", False),
    ("def not valid", False),
    ("192", False),
    ("192.", False),
    (".168.0", False),
    # Fail, too short or long
    ("192.168.0", False),
    ("192.168.0.2.8", False),
    # Fail, out of range
    ("192.168.0.259", False),
    ("256.256.256.256", False),
    ("-1.-1.-1.-1", False),
    # Fail, octal
    ("0192.168.0.2", False),
    ("192.168.00.2", False),
    ("192.168.0.02", False),
    # Fail, whitespace
    (" 192.168.0.2", False),
    ("192.168.0.2\n", False),
    # Pass, zero and full
    ("0.0.0.0", True),
    ("255.255.255.255", True),
    # Pass
    ("192.168.0.2", True),
    ("255.168.0.2", True),
    ("192.255.0.2", True),
    ("192.0.0.2", True),
    ("10.200.99.1", True),
]

FIXTURE_TABLES: Dict[str, List[Fixture]] = {
    "ipv4": IPV4_FIXTURES,
    "ipv6": IPV6_FIXTURES
}
