"""Space trivia shown alongside each gallery load."""

from __future__ import annotations

import random
from typing import Optional

FACTS = [
    "A day on Venus is longer than its year.",
    "There are more stars in the universe than grains of sand on Earth (by a lot).",
    "The Hubble Space Telescope has orbited Earth over 180,000 times.",
    "A teaspoon of a neutron star would weigh about a billion tons.",
    "Mars has the largest volcano in the solar system: Olympus Mons.",
    "Jupiter has 95+ confirmed moons.",
    "The observable universe is about 93 billion light-years across.",
    "Saturn would float in water (if you had an ocean big enough).",
    "The “Pillars of Creation” are inside the Eagle Nebula, ~7,000 ly away.",
    "The Sun makes up 99.8% of the Solar System’s mass.",
    "Spacesuits are custom-made and can cost millions of dollars.",
    "The coldest place in the universe we’ve found is the Boomerang Nebula (~1 K).",
    "A year on Mercury is just 88 Earth days.",
    "Some APOD entries are videos, look for the play button!",
    "The Milky Way and Andromeda galaxies will collide in ~4.5 billion years.",
]


def random_fact(rng: Optional[random.Random] = None) -> str:
    pick = (rng or random).choice(FACTS)
    return f"Did you know? {pick}"
