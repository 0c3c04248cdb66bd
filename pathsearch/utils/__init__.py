"""Readers and factories that build graphs and terrain for the routing core."""
