
import unittest

from mojo.ipliterals.validation import is_valid_ipv6

class TestIpv6ValidationPositive(unittest.TestCase):

    def test_is_ipv6_check_address_min(self):
        candidate = "0:0:0:0:0:0:0:0"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_max(self):
        candidate = "FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_mixed_case(self):
        candidate = "ffff:FFFF:abcd:ABCD:0:00:000:0000"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_zero_address(self):
        candidate = "::"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_exp_middle(self):
        candidate = "FFFF:FFFF::FFFF:FFFF:FFFF"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_exp_pre(self):
        candidate = "::FFFF:FFFF:FFFF:FFFF:FFFF"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_exp_post(self):
        candidate = "FFFF:FFFF:FFFF:FFFF:FFFF::"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_exp_seven_explicit(self):
        for candidate in ["11:22:33:44:55:66:77::", "::99:AA:BB:CC:DD:EE:FF", "11::33:44:55:66:77:88"]:
            result = is_valid_ipv6(candidate)
            assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_ipv4_suffix_full(self):
        candidate = "11:22:33:44:55:66:192.168.0.1"
        result = is_valid_ipv6(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_ipv4_suffix_compact(self):
        for candidate in ["::192.168.0.4", "11:22:33:44:55::192.168.0.1", "::BB:CC:DD:EE:FF:192.168.0.1",
                          "11::33:44:00:192.168.0.3", "11:22:33::0:66:192.168.0.3"]:
            result = is_valid_ipv6(candidate)
            assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_single_colon_ends(self):
        # One empty component is dropped from each end before the groups are counted.
        for candidate in [":1:2:3:4:5:6:7:8", "1:2:3:4:5:6:7:8:", ":1::2", "11::22:"]:
            result = is_valid_ipv6(candidate)
            assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_repeatable(self):
        for candidate in ["::", "11::33", "11:22:33:44:55:66:77:88", "11::22::33", "192.168.0.2", "", None, 0, []]:
            first = is_valid_ipv6(candidate)
            second = is_valid_ipv6(candidate)
            assert first is second, f"The candidate={candidate!r} should validate the same way every time."
        return


class TestIpv6ValidationNegative(unittest.TestCase):

    def test_is_ipv6_check_wrong_types(self):
        for candidate in [True, False, None, {}, [], object(), 0, 0.0, b"::", ["::"]]:
            result = is_valid_ipv6(candidate)
            assert result is False, f"The candidate={candidate!r} should have been rejected as not a string."
        return

    def test_is_ipv6_check_not_even_close(self):
        for candidate in ["", ":", "def not valid", "192.168.0.1"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_too_few_groups(self):
        for candidate in [":11:22:33", "11:22:33:", "11:22:33:44:55:66:77", "FF:FF:FF:FF", "FF:FF:FF:FF:192.168.0.1"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_too_many_groups(self):
        for candidate in ["11:22:33:44:55:66:77:88:99", "11:22:33:44:55:66:77:1.2.3.4"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_compaction_without_omission(self):
        for candidate in ["11:22:33:44:55:66:77:88::", "::88:99:AA:BB:CC:DD:EE:FF", "11:22:33::44:55:66:77:88",
                          "11:22:33:44:55:66::192.168.0.1", "::AA:BB:CC:DD:EE:FF:192.168.0.1"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_too_many_colons(self):
        for candidate in [":::", "FF:::", ":::FF", "11:::22", "::::"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_multiple_compactions(self):
        for candidate in ["11::22::33", "::11::", "11::22::", "::11::22", "1::2::3::4"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_bad_hextets(self):
        for candidate in ["G111:22:33:44:55:66:77:88", "88:99:AA:BB:CC:DD:EE:7FFFF", "11:22:33:44:55:66:77: 88",
                          "11:22:33:44:55:66:77:+88", "11:22:33:44:55:66:77:-8"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_bad_ipv4_suffix(self):
        for candidate in ["::192.168.0.259", "11:22:33:44:55:66:192.168.00.1", "192.168.0.1::", "1.2.3.4::11"]:
            result = is_valid_ipv6(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_zone_identifier(self):
        candidate = "fe80::1%eth0"
        result = is_valid_ipv6(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_long_input(self):
        candidate = "1:" * 100000 + "1"
        result = is_valid_ipv6(candidate)
        assert result is False, "A very long literal should be rejected without raising."
        return


if __name__ == '__main__':
    unittest.main()
