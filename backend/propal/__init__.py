"""
PROPAL backend package.
"""
