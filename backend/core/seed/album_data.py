"""
Vocabularies for demo album data.

Dependencies: backend.core.album_filters
System role: Static word lists sampled by the demo-data generator
"""

from backend.core.album_filters import GENRES

ALBUM_NAMES: tuple[str, ...] = (
    "Midnight Frequencies",
    "Paper Lanterns",
    "Concrete Gardens",
    "Echoes of the Tide",
    "Northern Static",
    "Velvet Machinery",
    "Slow Burn Summer",
    "Glass Cathedral",
    "Neon Prairie",
    "The Long Way Down",
    "Satellite Hearts",
    "Copper Skies",
    "Quiet Riot of Colour",
    "Lowlands",
    "After the Parade",
    "Harbour Lights",
    "Analog Dreams",
    "Wildfire Season",
    "Songs for Empty Rooms",
    "Blue Hour",
)

ARTISTS: tuple[str, ...] = (
    "The Wandering Keys",
    "Lena Marsh",
    "Static Bloom",
    "Jonah & The Lighthouse",
    "Velvet Owls",
    "Marcus Hale Quartet",
    "Nova Reyes",
    "The Paper Kites Collective",
    "DJ Solstice",
    "Ruby Okafor",
    "Iron Meridian",
    "Sunday Drivers",
    "Amara Blue",
    "The Hollow Pines",
    "Kofi Mensah",
)

# (rating, text) pairs; the generator samples rating and text independently
ALBUM_REVIEWS: tuple[tuple[int, str], ...] = (
    (5, "An instant classic. Every track earns its place."),
    (5, "Stunning production and the vocals are unreal."),
    (4, "Great front half, the closing tracks drag a little."),
    (4, "Grew on me after a few listens. Really rewarding."),
    (3, "Solid but safe. Nothing here surprised me."),
    (3, "A couple of standout songs surrounded by filler."),
    (2, "The mixing buries everything interesting."),
    (2, "Felt like a retread of their earlier work."),
    (1, "Could not get through it. Not for me at all."),
    (5, "The best thing I have heard this year."),
    (4, "Gorgeous arrangements, lyrics are a bit thin."),
    (3, "Fine background music, forgettable on its own."),
)

PLACEHOLDER_PHOTO_URL = "https://picsum.photos/seed/{seed}/300/300"

__all__ = [
    "GENRES",
    "ALBUM_NAMES",
    "ARTISTS",
    "ALBUM_REVIEWS",
    "PLACEHOLDER_PHOTO_URL",
]
