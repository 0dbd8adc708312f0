"""Smart turf booking service: slots, reservations, kits and pickup matches."""

__version__ = "1.0.0"
