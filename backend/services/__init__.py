"""
Services around the domain: the event scheduler, the food spawn cycle,
the game engine and the render sinks.
"""
