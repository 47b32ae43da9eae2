"""Live US-airspace aircraft tracker backed by Airplanes.live."""
