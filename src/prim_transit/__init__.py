"""Real-time Île-de-France public transit data from the PRIM APIs."""

__version__ = "0.1.0"
