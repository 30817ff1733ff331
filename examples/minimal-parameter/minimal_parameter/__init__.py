"""Example choice parameter package."""
