"""Netatmo weather station client and measurement decoding."""
