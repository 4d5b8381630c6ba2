"""
Product recommendation engine.

Responsibilities:
- Look up the static catalog for a style and room type.
- Drop categories the user keeps and add complementary picks.
- Score and rank candidates, bounded by the intensity tier.
- Place premium anchors next to their value alternatives.
"""
