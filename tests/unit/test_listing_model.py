"""Tests for fd_marketplace.domain.models.Listing."""

import dataclasses

import pytest

from src.fd_marketplace.domain.models import Listing


class TestFromOpensea:
    def test_maps_all_fields(self, raw_listing) -> None:
        raw = raw_listing(order_hash="0xfeed", price="420000000000000000", token_id="77")
        listing = Listing.from_opensea(raw)

        assert listing.order_hash == "0xfeed"
        assert listing.chain == "ethereum"
        assert listing.protocol_address == "0x0000000000000068f116a894984e2db1123eb395"
        assert listing.protocol_data is raw["protocol_data"]
        assert listing.nft_contract_address == "0xed5af388653567af2f388e6224dc7c4b3241c544"
        assert listing.token_id == "77"
        assert listing.price == "420000000000000000"
        assert listing.price_wei == 420000000000000000
        assert listing.currency == "ETH"
        assert listing.decimals == 18
        assert listing.type == "basic"

    def test_end_time_string_or_number(self, raw_listing) -> None:
        assert Listing.from_opensea(raw_listing(end_time="1900000000")).end_time == 1900000000
        assert Listing.from_opensea(raw_listing(end_time=1900000000)).end_time == 1900000000

    def test_integer_price_normalised_to_string(self, raw_listing) -> None:
        listing = Listing.from_opensea(raw_listing(price=5))
        assert listing.price == "5"

    def test_missing_type_is_none(self, raw_listing) -> None:
        raw = raw_listing()
        del raw["type"]
        assert Listing.from_opensea(raw).type is None

    def test_is_immutable(self, raw_listing) -> None:
        listing = Listing.from_opensea(raw_listing())
        with pytest.raises(dataclasses.FrozenInstanceError):
            listing.price = "1"  # type: ignore[misc]


class TestUnexpectedShape:
    def test_float_price_rejected(self, raw_listing) -> None:
        with pytest.raises(ValueError):
            Listing.from_opensea(raw_listing(price=1.5))

    def test_negative_price_rejected(self, raw_listing) -> None:
        with pytest.raises(ValueError):
            Listing.from_opensea(raw_listing(price="-1"))

    def test_bad_end_time_rejected(self, raw_listing) -> None:
        with pytest.raises(ValueError):
            Listing.from_opensea(raw_listing(end_time="soon"))

    def test_empty_offer_rejected(self, raw_listing) -> None:
        raw = raw_listing()
        raw["protocol_data"]["parameters"]["offer"] = []
        with pytest.raises(IndexError):
            Listing.from_opensea(raw)

    def test_null_currency_rejected(self, raw_listing) -> None:
        raw = raw_listing()
        raw["price"]["current"]["currency"] = None
        with pytest.raises(TypeError):
            Listing.from_opensea(raw)

    @pytest.mark.parametrize("key", ["order_hash", "chain", "protocol_address", "type"])
    def test_non_string_top_level_field_rejected(self, raw_listing, key) -> None:
        raw = raw_listing(**{key: 123})
        with pytest.raises(TypeError):
            Listing.from_opensea(raw)

    def test_null_order_hash_rejected(self, raw_listing) -> None:
        with pytest.raises(TypeError):
            Listing.from_opensea(raw_listing(order_hash=None))

    def test_explicit_null_type_allowed(self, raw_listing) -> None:
        assert Listing.from_opensea(raw_listing(type=None)).type is None

    def test_missing_price_rejected(self, raw_listing) -> None:
        raw = raw_listing()
        del raw["price"]
        with pytest.raises(KeyError):
            Listing.from_opensea(raw)
