"""Ride-sharing marketplace backend for Benin: city directory, fares and seat booking."""
