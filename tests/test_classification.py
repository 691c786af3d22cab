"""
Tests for dominio colors, origen icons and notification app colors.
"""

import pytest

from depositos.services.classification import (
    DEFAULT_TINT,
    PROVIDER_COLORS,
    Provider,
    get_app_color,
    get_dominio_color,
    get_origen_icon,
)

PURPLE = "#6f42c1"
BLUE = "#0098d8"


@pytest.mark.parametrize("dominio", ["yape", "YAPE", "Yape"])
def test_yape_is_purple_in_any_case(dominio):
    assert get_dominio_color(dominio) == PURPLE


def test_bcp_is_blue():
    assert get_dominio_color("bcp") == BLUE
    assert get_dominio_color("BCP") == BLUE


@pytest.mark.parametrize("dominio", [None, "", "interbank", "plin"])
def test_unknown_dominio_falls_back_to_default(dominio):
    assert get_dominio_color(dominio) == DEFAULT_TINT
    assert get_dominio_color(dominio, default="#123456") == "#123456"


def test_every_provider_has_a_color():
    assert set(PROVIDER_COLORS) == set(Provider)


def test_provider_from_dominio():
    assert Provider.from_dominio(" Yape ") is Provider.YAPE
    assert Provider.from_dominio("nope") is None
    assert Provider.from_dominio(None) is None


def test_origen_icons():
    assert get_origen_icon("QR") == "qr-code"
    assert get_origen_icon("número") == "hash"
    assert get_origen_icon(None) == "help-circle"
    assert get_origen_icon("transferencia") == "help-circle"


def test_app_color_by_package_name():
    assert get_app_color("com.bcp.innovacxion.yapeapp") == PURPLE
    assert get_app_color("com.bcp.bancadigital") == BLUE
    assert get_app_color("com.whatsapp") == DEFAULT_TINT
    assert get_app_color(None) == DEFAULT_TINT
