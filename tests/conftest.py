"""
Pytest configuration and fixtures for delivery postage tests.
"""
import os
import struct
from decimal import Decimal

import pytest

# Set test environment before importing package modules
os.environ["POSTAGE_CURRENCY"] = "EUR"

from delivery_postage.core.i18n import Translator  # noqa: E402
from delivery_postage.models import Address, Cart, CartItem, Country, State  # noqa: E402
from delivery_postage.modules.delivery import BaseDeliveryModule  # noqa: E402


class StubDeliveryModule(BaseDeliveryModule):
    """Flat-rate module delivering only to the configured countries."""

    def __init__(self, code="stub", countries=("FR",), postage=Decimal("7.90"), mode="delivery"):
        self._code = code
        self.countries = set(countries)
        self.postage = postage
        self.mode = mode
        self.postage_calls = 0

    @property
    def code(self):
        return self._code

    def is_valid_delivery(self, country, state=None):
        return country is not None and country.iso_alpha2 in self.countries

    def get_postage(self, country, state=None):
        self.postage_calls += 1
        return self.postage

    def get_delivery_mode(self):
        return self.mode


@pytest.fixture(autouse=True)
def fresh_translator():
    """Each test gets a translator built from current settings."""
    Translator.reset_instance()
    yield
    Translator.reset_instance()


@pytest.fixture
def france() -> Country:
    return Country(id=64, iso_alpha2="FR", iso_alpha3="FRA", title="France")


@pytest.fixture
def germany() -> Country:
    return Country(id=59, iso_alpha2="DE", iso_alpha3="DEU", title="Germany")


@pytest.fixture
def usa() -> Country:
    return Country(id=196, iso_alpha2="US", iso_alpha3="USA", title="United States", has_states=True)


@pytest.fixture
def california(usa) -> State:
    return State(id=5, iso_code="CA", title="California", country=usa)


@pytest.fixture
def new_york(usa) -> State:
    return State(id=32, iso_code="NY", title="New York", country=usa)


@pytest.fixture
def german_address(germany) -> Address:
    return Address(
        id=1,
        first_name="Erika",
        last_name="Mustermann",
        address_line1="Heidestrasse 17",
        city="Koeln",
        zip_code="51147",
        country=germany,
    )


@pytest.fixture
def new_york_address(usa, new_york) -> Address:
    return Address(
        id=2,
        address_line1="123 Main Street",
        city="New York",
        zip_code="10001",
        country=usa,
        state=new_york,
    )


@pytest.fixture
def cart() -> Cart:
    return Cart(
        id=1,
        token="cart-token",
        currency="EUR",
        items=[
            CartItem(product_ref="COMIC-001", quantity=2, price=Decimal("4.99"), weight=Decimal("0.250")),
            CartItem(product_ref="FUNKO-042", quantity=1, price=Decimal("14.00"), weight=Decimal("0.400")),
        ],
    )


@pytest.fixture
def stub_module() -> StubDeliveryModule:
    return StubDeliveryModule()


def write_mo_catalog(path, messages):
    """Write a GNU gettext .mo file holding messages (source -> translation)."""
    messages = dict(messages)
    messages.setdefault("", "Content-Type: text/plain; charset=UTF-8\n")
    keys = sorted(messages)
    ids = b""
    strs = b""
    entries = []
    for key in keys:
        key_bytes = key.encode("utf-8")
        value_bytes = messages[key].encode("utf-8")
        entries.append((len(ids), len(key_bytes), len(strs), len(value_bytes)))
        ids += key_bytes + b"\0"
        strs += value_bytes + b"\0"

    count = len(keys)
    key_start = 7 * 4 + 16 * count
    value_start = key_start + len(ids)
    key_offsets = []
    value_offsets = []
    for id_offset, id_length, str_offset, str_length in entries:
        key_offsets += [id_length, id_offset + key_start]
        value_offsets += [str_length, str_offset + value_start]

    header = struct.pack("<7I", 0x950412DE, 0, count, 7 * 4, 7 * 4 + count * 8, 0, 0)
    table = struct.pack(f"<{len(key_offsets)}I", *key_offsets)
    table += struct.pack(f"<{len(value_offsets)}I", *value_offsets)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(header + table + ids + strs)


@pytest.fixture
def french_catalog(tmp_path, monkeypatch):
    """fr_FR catalog on disk, wired into settings for the shared translator."""
    from delivery_postage.core.config import settings

    write_mo_catalog(
        tmp_path / "fr_FR" / "LC_MESSAGES" / f"{settings.TRANSLATION_DOMAIN}.mo",
        {
            "A delivery module can only be of type pickup or delivery":
                "Un module de livraison ne peut être que de type pickup ou delivery",
            "A postage amount must be a number":
                "Le montant des frais de port doit être un nombre",
            "Module %(code)s": "Module de livraison %(code)s",
        },
    )
    monkeypatch.setattr(settings, "TRANSLATIONS_DIR", str(tmp_path))
    monkeypatch.setattr(settings, "DEFAULT_LOCALE", "fr_FR")
    Translator.reset_instance()
    return tmp_path
