"""Uniform-envelope REST service scaffold with health and error translation."""
