"""Mincha/Maariv zmanim for the shul board."""

__version__ = "1.0.0"
