"""Customer-facing copy for the restoration tiers."""

from __future__ import annotations

from typing import Dict

from ..validation import Tier

TIER_CONTENT: Dict[Tier, dict] = {
    Tier.BASIC: {
        "name": "Basic Restoration",
        "description": "Professional cleaning and protection for immediate aesthetic improvement",
        "features": (
            "Professional pressure washing of all surfaces",
            "Spot treatment of oil and organic stains",
            "Application of high-quality Acrylic Sealer",
            "Color enhancement and stain resistance",
        ),
    },
    Tier.RECOMMENDED: {
        "name": "Recommended Restoration",
        "description": "Complete restoration addressing stability and long-term health of your pavers",
        "features": (
            "Everything in Basic package",
            "Full removal of old joint material",
            "Installation of new Polymeric Sand",
            "Locks pavers, prevents weeds, stabilizes surface",
            "Acrylic Sealer for protection",
        ),
    },
    Tier.PREMIUM: {
        "name": "Premium Protection",
        "description": "Ultimate protection against harsh elements with minimal future maintenance",
        "features": (
            "Everything in Recommended package",
            "Upgrade to Penetrating Siloxane/Silane Sealer",
            "Superior freeze-thaw protection",
            "5-7+ year protection lifespan",
            "Maximum resistance to de-icing salts",
        ),
    },
}
