"""Currency display strings per region. Amounts are never converted."""

from typing import Literal

Region = Literal["US", "UK", "EU"]

REGION_CONFIGS: dict[str, dict[str, str]] = {
    "US": {"currency": "USD", "symbol": "$", "position": "prefix", "grouping": ","},
    "UK": {"currency": "GBP", "symbol": "£", "position": "prefix", "grouping": ","},
    # de-DE style: 1.234 €
    "EU": {"currency": "EUR", "symbol": "€", "position": "suffix", "grouping": "."},
}


def format_currency(amount: float, region: Region = "US") -> str:
    """Format ``amount`` as whole currency units for ``region``, e.g. ``$17,308``."""
    config = REGION_CONFIGS[region]
    rounded = round(amount)
    digits = f"{abs(rounded):,}".replace(",", config["grouping"])
    sign = "-" if rounded < 0 else ""

    if config["position"] == "suffix":
        return f"{sign}{digits} {config['symbol']}"
    return f"{sign}{config['symbol']}{digits}"
