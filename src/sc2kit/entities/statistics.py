"""
Named MISC statistics.

MISC decodes to roughly 1200 big-endian integers. Only some positions have
a known meaning; this table names those. Unnamed positions stay reachable
through City.get_misc_value().
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Industry(Enum):
    """The eleven industries, in the order MISC stores them."""
    STEEL_MINING = "steel_mining"
    TEXTILES = "textiles"
    PETROCHEMICAL = "petrochemical"
    FOOD = "food"
    CONSTRUCTION = "construction"
    AUTOMOTIVE = "automotive"
    AEROSPACE = "aerospace"
    FINANCE = "finance"
    MEDIA = "media"
    ELECTRONICS = "electronics"
    TOURISM = "tourism"


class MiscStatistic(Enum):
    CITY_SIZE = "city_size"
    AVAILABLE_FUNDS = "available_funds"
    WORKFORCE_PERCENTAGE = "workforce_percentage"
    LIFE_EXPECTANCY = "life_expectancy"
    EDUCATION_QUOTIENT = "education_quotient"
    YEAR_OF_FOUNDING = "year_of_founding"
    DAYS_SINCE_FOUNDING = "days_since_founding"

    STEEL_MINING_RATIO = "steel_mining_ratio"
    TEXTILES_RATIO = "textiles_ratio"
    PETROCHEMICAL_RATIO = "petrochemical_ratio"
    FOOD_RATIO = "food_ratio"
    CONSTRUCTION_RATIO = "construction_ratio"
    AUTOMOTIVE_RATIO = "automotive_ratio"
    AEROSPACE_RATIO = "aerospace_ratio"
    FINANCE_RATIO = "finance_ratio"
    MEDIA_RATIO = "media_ratio"
    ELECTRONICS_RATIO = "electronics_ratio"
    TOURISM_RATIO = "tourism_ratio"

    STEEL_MINING_TAX_RATE = "steel_mining_tax_rate"
    TEXTILES_TAX_RATE = "textiles_tax_rate"
    PETROCHEMICAL_TAX_RATE = "petrochemical_tax_rate"
    FOOD_TAX_RATE = "food_tax_rate"
    CONSTRUCTION_TAX_RATE = "construction_tax_rate"
    AUTOMOTIVE_TAX_RATE = "automotive_tax_rate"
    AEROSPACE_TAX_RATE = "aerospace_tax_rate"
    FINANCE_TAX_RATE = "finance_tax_rate"
    MEDIA_TAX_RATE = "media_tax_rate"
    ELECTRONICS_TAX_RATE = "electronics_tax_rate"
    TOURISM_TAX_RATE = "tourism_tax_rate"

    STEEL_MINING_DEMAND = "steel_mining_demand"
    TEXTILES_DEMAND = "textiles_demand"
    PETROCHEMICAL_DEMAND = "petrochemical_demand"
    FOOD_DEMAND = "food_demand"
    CONSTRUCTION_DEMAND = "construction_demand"
    AUTOMOTIVE_DEMAND = "automotive_demand"
    AEROSPACE_DEMAND = "aerospace_demand"
    FINANCE_DEMAND = "finance_demand"
    MEDIA_DEMAND = "media_demand"
    ELECTRONICS_DEMAND = "electronics_demand"
    TOURISM_DEMAND = "tourism_demand"

    NEIGHBOR_SIZE_1 = "neighbor_size_1"
    NEIGHBOR_SIZE_2 = "neighbor_size_2"
    NEIGHBOR_SIZE_3 = "neighbor_size_3"
    NEIGHBOR_SIZE_4 = "neighbor_size_4"

    @classmethod
    def for_industry(cls, industry: Industry, kind: str) -> 'MiscStatistic':
        """Look up e.g. for_industry(Industry.FOOD, "demand")."""
        return cls(f"{industry.value}_{kind}")


# First MISC index of each 11-wide industry block.
INDUSTRY_RATIO_BASE = 991
INDUSTRY_TAX_RATE_BASE = 1002
INDUSTRY_DEMAND_BASE = 1013


def _build_index() -> Mapping[MiscStatistic, int]:
    table = {
        MiscStatistic.YEAR_OF_FOUNDING: 3,
        MiscStatistic.DAYS_SINCE_FOUNDING: 4,
        MiscStatistic.AVAILABLE_FUNDS: 5,
        MiscStatistic.WORKFORCE_PERCENTAGE: 17,
        MiscStatistic.LIFE_EXPECTANCY: 18,
        MiscStatistic.EDUCATION_QUOTIENT: 19,
        MiscStatistic.NEIGHBOR_SIZE_1: 439,
        MiscStatistic.NEIGHBOR_SIZE_2: 443,
        MiscStatistic.NEIGHBOR_SIZE_3: 447,
        MiscStatistic.NEIGHBOR_SIZE_4: 451,
        MiscStatistic.CITY_SIZE: 1035,
    }
    for offset, industry in enumerate(Industry):
        table[MiscStatistic.for_industry(industry, "ratio")] = INDUSTRY_RATIO_BASE + offset
        table[MiscStatistic.for_industry(industry, "tax_rate")] = INDUSTRY_TAX_RATE_BASE + offset
        table[MiscStatistic.for_industry(industry, "demand")] = INDUSTRY_DEMAND_BASE + offset
    return MappingProxyType(table)


STATISTIC_INDEX: Mapping[MiscStatistic, int] = _build_index()
MAX_STATISTIC_INDEX = max(STATISTIC_INDEX.values())
