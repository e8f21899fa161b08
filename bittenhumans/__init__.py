"""
Bittenhumans - human-readable byte sizes.
"""
