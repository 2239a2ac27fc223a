"""Listings app: the seven rentable property families and their catalogues."""
