"""
Runtime services around the game engine: state ownership and ticking.
"""
