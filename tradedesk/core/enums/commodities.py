"""
Commodity enumerations.

This module defines the commodities quoted by the bundled market data.
Ledger operations accept any commodity identifier; this enum covers the
instruments the mock price source knows about.
"""

from enum import StrEnum


class CommodityCategory(StrEnum):
    """Market segment a commodity is listed under."""

    METALS = "metals"
    ENERGY = "energy"
    AGRICULTURE = "agriculture"
    OTHERS = "others"


class Commodity(StrEnum):
    """
    Known commodities.

    Values are the identifiers used by the ledger, watchlist and price source.
    """

    # Metals
    GOLD = "gold"
    SILVER = "silver"
    COPPER = "copper"
    ALUMINIUM = "aluminium"
    LEAD = "lead"
    ZINC = "zinc"
    NICKEL = "nickel"

    # Energy
    CRUDE_OIL = "crude_oil"
    NATURAL_GAS = "natural_gas"
    BRENT_CRUDE = "brent_crude"
    HEATING_OIL = "heating_oil"

    # Agriculture
    COTTON = "cotton"
    SOYBEAN = "soybean"
    WHEAT = "wheat"
    CORN = "corn"
    SUGAR = "sugar"

    # Others
    RUBBER = "rubber"
    MENTHA_OIL = "mentha_oil"
    CPO = "cpo"

    @property
    def category(self) -> CommodityCategory:
        """Market segment for this commodity."""
        return _CATEGORIES[self]

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. "Crude Oil"."""
        if self == Commodity.CPO:
            return "CPO"
        return self.value.replace("_", " ").title()

    @classmethod
    def from_string(cls, value: str) -> "Commodity":
        """
        Convert string to Commodity enum, with case-insensitive matching.

        Accepts both identifiers ("crude_oil") and ticker style ("CRUDEOIL").

        Raises:
            ValueError: If commodity is not supported
        """
        normalized = value.strip().lower()
        for commodity in cls:
            if normalized in (commodity.value, commodity.value.replace("_", "")):
                return commodity
        raise ValueError(
            f"Unsupported commodity: {value}. "
            f"Supported commodities: {', '.join([c.value for c in cls])}"
        )

    @classmethod
    def by_category(cls, category: CommodityCategory) -> list["Commodity"]:
        """All commodities listed under a category."""
        return [commodity for commodity in cls if commodity.category == category]


_CATEGORIES: dict[Commodity, CommodityCategory] = {
    Commodity.GOLD: CommodityCategory.METALS,
    Commodity.SILVER: CommodityCategory.METALS,
    Commodity.COPPER: CommodityCategory.METALS,
    Commodity.ALUMINIUM: CommodityCategory.METALS,
    Commodity.LEAD: CommodityCategory.METALS,
    Commodity.ZINC: CommodityCategory.METALS,
    Commodity.NICKEL: CommodityCategory.METALS,
    Commodity.CRUDE_OIL: CommodityCategory.ENERGY,
    Commodity.NATURAL_GAS: CommodityCategory.ENERGY,
    Commodity.BRENT_CRUDE: CommodityCategory.ENERGY,
    Commodity.HEATING_OIL: CommodityCategory.ENERGY,
    Commodity.COTTON: CommodityCategory.AGRICULTURE,
    Commodity.SOYBEAN: CommodityCategory.AGRICULTURE,
    Commodity.WHEAT: CommodityCategory.AGRICULTURE,
    Commodity.CORN: CommodityCategory.AGRICULTURE,
    Commodity.SUGAR: CommodityCategory.AGRICULTURE,
    Commodity.RUBBER: CommodityCategory.OTHERS,
    Commodity.MENTHA_OIL: CommodityCategory.OTHERS,
    Commodity.CPO: CommodityCategory.OTHERS,
}
