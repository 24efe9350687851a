"""Core gameplay systems (input, physics, collision, mining, spawning, rendering).

Kept free of terminal concerns so it can be driven by the game loop, a fake
display in tests, or any other front end.
"""
