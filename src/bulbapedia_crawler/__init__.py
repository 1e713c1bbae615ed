# ABOUTME: Bulbapedia crawler package root
# ABOUTME: Extracts catalog references and detail records from Bulbapedia pages

__version__ = "0.1.0"
