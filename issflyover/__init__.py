"""
ISS fly-over lookup

Finds the next ISS passes over the caller's location by chaining a public
IP lookup, an IP geolocation lookup and a pass-time lookup.
"""
