"""
Command-line interface for the banghay package.
"""
