"""Static keyword, severity and weight tables for the risk classifier.

All matching is lower-case substring containment, so every entry here must be
lower-case. Order within each tuple is the order matches are reported in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from ..models import RiskCategory

CATEGORY_KEYWORDS: Mapping[RiskCategory, Tuple[str, ...]] = MappingProxyType(
    {
        "Geopolitical": (
            "war", "conflict", "sanction", "geopolitic", "military", "coup",
            "invasion", "nuclear", "treaty", "nato", "terrorism", "ceasefire",
            "troops", "missile", "airstrike", "alliance", "diplomatic crisis",
            "political instability", "rebel", "insurgency", "annexation",
        ),
        "Monetary": (
            "inflation", "interest rate", "central bank", "federal reserve",
            "fed rate", "ecb", "monetary policy", "rate hike", "rate cut",
            "quantitative easing", "currency", "deflation", "stagflation",
            "bond yield", "treasury", "repo rate", "liquidity",
        ),
        "Commodity": (
            "oil", "gold", "commodity", "energy", "crude oil", "brent",
            "opec", "fuel", "copper", "wheat", "food price", "grain",
            "natural gas", "lng", "rare earth", "silver", "coffee",
        ),
        "SupplyChain": (
            "supply chain", "logistics", "shortage", "disruption", "trade war",
            "tariff", "import ban", "export ban", "shipping", "port",
            "semiconductor", "chip shortage", "freight", "factory shutdown",
            "manufacturing", "inventory", "bottleneck",
        ),
        # Fallback bucket only; never matched directly
        "General": (),
    }
)

# (boost, words) in priority order; the first tier with any hit wins
SEVERITY_TIERS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (
        40,
        (
            "war", "crash", "collapse", "invasion", "nuclear", "catastrophic",
            "emergency", "meltdown", "default", "hyperinflation", "famine",
        ),
    ),
    (
        25,
        (
            "surge", "spike", "sanction", "recession", "shock", "escalation",
            "plunge", "ban", "freeze", "blockade", "halt",
        ),
    ),
    (
        12,
        (
            "rise", "increase", "concern", "tension", "risk", "volatile",
            "warning", "threat", "instability", "downgrade", "slowdown",
        ),
    ),
)

BASELINE_BOOST = 5

# Category weight (0.3-1.0) is scaled onto this many points of the article score
CATEGORY_SCALE = 60

SCORE_MIN = 0
SCORE_MAX = 100

# Upper bounds (inclusive) of the LOW and MEDIUM impact bands
LOW_IMPACT_MAX = 30
MEDIUM_IMPACT_MAX = 70
