"""
Runtime services: tick and render loops, terminal renderer, replay recording.
"""
