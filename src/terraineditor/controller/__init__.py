"""
The CONTROLLER layer drives the editors over time and talks to the generator.

Note: The paint driver depends on QtCore timers only; nothing here builds widgets.
"""
