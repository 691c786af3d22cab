# depositos/services/classification.py
import enum

from depositos.core.config import settings

DEFAULT_TINT = settings.DEFAULT_TINT


class Provider(str, enum.Enum):
    YAPE = "yape"
    BCP = "bcp"

    @classmethod
    def from_dominio(cls, dominio: str | None) -> "Provider | None":
        if not dominio:
            return None
        try:
            return cls(dominio.strip().lower())
        except ValueError:
            return None


PROVIDER_COLORS: dict[Provider, str] = {
    Provider.YAPE: "#6f42c1",  # purple
    Provider.BCP: "#0098d8",   # blue
}

ORIGEN_ICONS: dict[str, str] = {
    "qr": "qr-code",
    "número": "hash",
}
UNKNOWN_ORIGEN_ICON = "help-circle"


def get_dominio_color(dominio: str | None, default: str = DEFAULT_TINT) -> str:
    provider = Provider.from_dominio(dominio)
    if provider is None:
        return default
    return PROVIDER_COLORS[provider]


def get_origen_icon(origen: str | None) -> str:
    if not origen:
        return UNKNOWN_ORIGEN_ICON
    return ORIGEN_ICONS.get(origen.strip().lower(), UNKNOWN_ORIGEN_ICON)


def get_app_color(package_name: str | None, default: str = DEFAULT_TINT) -> str:
    """Color for a captured notification, keyed on the sending app's package name."""
    if not package_name:
        return default
    package_name = package_name.lower()
    for provider in Provider:
        if provider.value in package_name:
            return PROVIDER_COLORS[provider]
    return default
