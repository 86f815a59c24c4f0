"""
Weather-driven outfit recommendations.

Responsibilities:
- Map a weather reading onto the wardrobe categories that suit it.
- Pick the user's items in those categories, de-duplicated, in rule order.
- Attach a rationale to each item and a summary to the whole outfit.
- Keep a per-user history of generated recommendations.
"""
