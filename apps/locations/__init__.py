"""Locations app: the state / city / area hierarchy listings point at."""
