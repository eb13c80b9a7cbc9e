"""Tests for GUID and IPv6 recognition."""

from __future__ import annotations

from typing import Any

import pytest

from albumctl.domain.identifiers import is_valid_guid, is_valid_ipv6

SAMPLE_GUID = "123e4567-e89b-12d3-a456-426614174000"


class TestGuid:
    def test_sample(self) -> None:
        assert is_valid_guid(SAMPLE_GUID)

    @pytest.mark.parametrize(
        "guid",
        [
            "550e8400-e29b-41d4-a716-446655440000",
            "6BA7B810-9DAD-11D1-80B4-00C04FD430C8",
            "f47ac10b-58cc-5372-b567-0e02b2c3d479",
            "00000000-0000-3000-9000-000000000000",
        ],
    )
    def test_valid(self, guid: str) -> None:
        assert is_valid_guid(guid)

    def test_non_hex_last_character(self) -> None:
        assert not is_valid_guid(SAMPLE_GUID[:-1] + "g")

    def test_one_short(self) -> None:
        assert not is_valid_guid(SAMPLE_GUID[:-1])

    def test_one_long(self) -> None:
        assert not is_valid_guid(SAMPLE_GUID + "0")

    @pytest.mark.parametrize("version", ["0", "6", "f"])
    def test_version_nibble(self, version: str) -> None:
        assert not is_valid_guid(f"123e4567-e89b-{version}2d3-a456-426614174000")

    @pytest.mark.parametrize("variant", ["0", "7", "c", "F"])
    def test_variant_nibble(self, variant: str) -> None:
        assert not is_valid_guid(f"123e4567-e89b-12d3-{variant}456-426614174000")

    @pytest.mark.parametrize(
        "guid",
        [
            "",
            "123e4567e89b12d3a456426614174000",
            "123e4567-e89b-12d3-a456426614174000",
            "{123e4567-e89b-12d3-a456-426614174000}",
            " 123e4567-e89b-12d3-a456-426614174000",
            "123e4567-e89b-12d3-a456-426614174000\n",
        ],
    )
    def test_wrong_shape(self, guid: str) -> None:
        assert not is_valid_guid(guid)

    @pytest.mark.parametrize("value", [None, 123, b"123e4567-e89b-12d3-a456-426614174000"])
    def test_non_text(self, value: Any) -> None:
        assert not is_valid_guid(value)


class TestIpv6:
    @pytest.mark.parametrize(
        "address",
        [
            "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
            "2001:db8:85a3:0:0:8A2E:370:7334",
            "::1",
            "::",
            "1::",
            "1:2:3:4:5:6:7::",
            "1::8",
            "1:2:3:4:5:6::8",
            "1::7:8",
            "1::6:7:8",
            "1::5:6:7:8",
            "1::4:5:6:7:8",
            "1::3:4:5:6:7:8",
            "::2:3:4:5:6:7:8",
            "2001:db8::8a2e:370:7334",
            "fe80::7:8%eth0",
            "fe80::1%1",
            "::255.255.255.255",
            "::ffff:192.0.2.1",
            "::ffff:0:192.0.2.1",
            "2001:db8:3:4::192.0.2.33",
            "64:ff9b::192.0.2.33",
        ],
    )
    def test_valid(self, address: str) -> None:
        assert is_valid_ipv6(address)

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "1:2:3:4:5:6:7",
            "1:2:3:4:5:6:7:8:9",
            "123.123.123.123",
            ":",
            ":::",
            "1:::2",
            "1::2::3",
            "12345::1",
            "g::1",
            "2001:db8::8a2e:370:7334 ",
            "::1\n",
            "::ffff:256.0.2.1",
            "::ffff:192.0.2",
            "fe80::1%",
            "fe80::1%eth-0",
        ],
    )
    def test_invalid(self, address: str) -> None:
        assert not is_valid_ipv6(address)

    @pytest.mark.parametrize("value", [None, 1, b"::1"])
    def test_non_text(self, value: Any) -> None:
        assert not is_valid_ipv6(value)
